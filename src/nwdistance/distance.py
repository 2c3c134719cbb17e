from __future__ import annotations

"""Needleman-Wunsch edit distance with two rolling rows."""

from collections.abc import Sized
from typing import Collection, Iterable, List, TypeVar

E = TypeVar("E")


def _as_collection(items: Iterable[E]) -> Collection[E]:
    # One-shot iterators cannot be walked once per outer step.
    if isinstance(items, Sized):
        return items  # type: ignore[return-value]
    return tuple(items)


def needleman_wunsch_distance(first: Iterable[E], second: Iterable[E]) -> int:
    """Return the edit distance between *first* and *second*.

    Insertions, deletions and substitutions all cost 1, matches cost 0. The
    elements only need to support ``==`` against each other; any exception
    raised by that comparison reaches the caller unchanged.

    The longer operand drives the outer loop so the two scratch rows are
    ``min(len(first), len(second)) + 1`` long.
    """

    longer = _as_collection(first)
    shorter = _as_collection(second)
    if len(longer) < len(shorter):
        longer, shorter = shorter, longer

    # previous[j]: distance between the first i-1 elements of ``longer`` and
    # the first j elements of ``shorter``.
    previous: List[int] = list(range(len(shorter) + 1))
    current: List[int] = [0] * len(previous)
    for i, item_long in enumerate(longer, start=1):
        current[0] = i
        for j, item_short in enumerate(shorter, start=1):
            insert_delete = 1 + min(current[j - 1], previous[j])
            replace_or_match = previous[j - 1] + (item_long != item_short)
            current[j] = min(insert_delete, replace_or_match)
        previous, current = current, previous
    return previous[-1]


distance = needleman_wunsch_distance
