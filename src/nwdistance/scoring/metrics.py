from __future__ import annotations

"""Scores derived from the edit distance."""

from typing import Any, Collection, Dict, Iterable

from ..distance import needleman_wunsch_distance


def normalized_distance(a: Collection[Any], b: Collection[Any]) -> float:
    """Edit distance scaled into ``[0, 1]`` by the longer operand's length."""

    longest = max(len(a), len(b))
    if not longest:
        return 0.0
    return needleman_wunsch_distance(a, b) / longest


def similarity(a: Collection[Any], b: Collection[Any]) -> float:
    return 1.0 - normalized_distance(a, b)


def summarise(distances: Iterable[float]) -> Dict[str, Any]:
    """Reduce a batch of distances to count/mean/min/max."""

    values = list(distances)
    if not values:
        return {"count": 0, "mean": 0.0, "min": None, "max": None}
    return {
        "count": len(values),
        "mean": sum(values) / len(values),
        "min": min(values),
        "max": max(values),
    }
