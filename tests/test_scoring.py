from __future__ import annotations

import pytest

from nwdistance.scoring import normalized_distance, similarity, summarise


def test_normalized_distance_scales_by_longest() -> None:
    assert normalized_distance("kitten", "sitting") == pytest.approx(3 / 7)
    assert normalized_distance("abc", "") == pytest.approx(1.0)
    assert normalized_distance("", "") == 0.0


def test_similarity_complements_normalized_distance() -> None:
    assert similarity("flaw", "lawn") == pytest.approx(0.5)
    assert similarity("same", "same") == pytest.approx(1.0)
    assert similarity("", "") == pytest.approx(1.0)


def test_summarise_reduces_batch() -> None:
    summary = summarise([3, 0, 2, 1])
    assert summary["count"] == 4
    assert summary["mean"] == pytest.approx(1.5)
    assert summary["min"] == 0
    assert summary["max"] == 3


def test_summarise_empty_batch() -> None:
    assert summarise([]) == {"count": 0, "mean": 0.0, "min": None, "max": None}
