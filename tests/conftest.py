from __future__ import annotations

import random
from typing import Callable, List, Sequence

import pytest


def _full_matrix_distance(a: Sequence[object], b: Sequence[object]) -> int:
    rows = len(a) + 1
    cols = len(b) + 1
    matrix = [[0 for _ in range(cols)] for _ in range(rows)]
    for i in range(rows):
        matrix[i][0] = i
    for j in range(cols):
        matrix[0][j] = j
    for i in range(1, rows):
        for j in range(1, cols):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            matrix[i][j] = min(
                matrix[i - 1][j] + 1,
                matrix[i][j - 1] + 1,
                matrix[i - 1][j - 1] + cost,
            )
    return matrix[-1][-1]


@pytest.fixture
def reference_distance() -> Callable[[Sequence[object], Sequence[object]], int]:
    """Full-matrix edit distance used as an oracle."""

    return _full_matrix_distance


@pytest.fixture
def random_strings() -> List[str]:
    rng = random.Random(11)
    alphabet = "ACGT"
    return ["".join(rng.choice(alphabet) for _ in range(rng.randint(0, 12))) for _ in range(25)]
