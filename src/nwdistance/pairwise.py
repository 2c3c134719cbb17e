from __future__ import annotations

"""Distances over many independent pairs of sequences."""

from dataclasses import dataclass
from typing import Any, Collection, Generic, Iterable, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

from .config import DEFAULT_OPTIONS, LOG_LEVELS, PairwiseOptions
from .distance import needleman_wunsch_distance
from .scoring.metrics import normalized_distance
from .utils.logging import get_logger

T = TypeVar("T")


@dataclass(frozen=True)
class Match(Generic[T]):
    index: int
    candidate: T
    distance: float


def _score(a: Collection[Any], b: Collection[Any], normalize: bool) -> float:
    if normalize:
        return normalized_distance(a, b)
    return needleman_wunsch_distance(a, b)


def batch_distances(pairs: Iterable[Tuple[Collection[Any], Collection[Any]]]) -> List[int]:
    """Distance of every ``(a, b)`` pair, in input order."""

    return [needleman_wunsch_distance(a, b) for a, b in pairs]


def distance_matrix(
    sequences: Sequence[Collection[Any]], options: Optional[PairwiseOptions] = None
) -> np.ndarray:
    """Symmetric matrix of distances between every pair of *sequences*.

    Each unordered pair is computed once and mirrored; the diagonal is zero.
    """

    options = options or DEFAULT_OPTIONS
    logger = get_logger("pairwise")
    report_level = LOG_LEVELS[options.log_level]
    size = len(sequences)
    dtype = np.float64 if options.normalize else np.int64
    matrix = np.zeros((size, size), dtype=dtype)
    for i in range(size):
        for j in range(i + 1, size):
            value = _score(sequences[i], sequences[j], options.normalize)
            matrix[i, j] = value
            matrix[j, i] = value
    if logger.isEnabledFor(report_level):
        logger.log(
            report_level,
            "Computed %d pair distances for %d sequences",
            size * (size - 1) // 2,
            size,
        )
    return matrix


def nearest(
    query: Collection[Any],
    candidates: Sequence[T],
    options: Optional[PairwiseOptions] = None,
) -> List[Match[T]]:
    """Return the ``top_k`` candidates closest to *query*.

    Ties are broken by candidate position. Asking for more matches than there
    are candidates returns all of them.
    """

    options = options or DEFAULT_OPTIONS
    logger = get_logger("pairwise")
    report_level = LOG_LEVELS[options.log_level]
    scored = [
        Match(index=idx, candidate=candidate, distance=_score(query, candidate, options.normalize))
        for idx, candidate in enumerate(candidates)
    ]
    scored.sort(key=lambda match: (match.distance, match.index))
    selected = scored[: options.top_k]
    if selected and logger.isEnabledFor(report_level):
        logger.log(
            report_level,
            "Best of %d candidates at index %d (distance %s)",
            len(candidates),
            selected[0].index,
            selected[0].distance,
        )
    return selected
