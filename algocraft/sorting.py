"""In-place quicksort, selection sort and Fisher-Yates shuffle."""

from __future__ import annotations

import random
from collections.abc import MutableSequence
from typing import Any


def _bounds(items: MutableSequence[Any], begin: int, end: int | None) -> tuple[int, int]:
    if end is None:
        end = len(items) - 1
    if begin < 0 or end >= len(items):
        raise IndexError(f"range [{begin}, {end}] lies outside a sequence of {len(items)}")
    return begin, end


def _partition(items: MutableSequence[Any], begin: int, end: int) -> int:
    pivot_idx = random.randint(begin, end)
    pivot = items[pivot_idx]
    items[begin], items[pivot_idx] = items[pivot_idx], items[begin]

    i = begin + 1
    j = end
    while i <= j:
        while i <= end and items[i] <= pivot:
            i += 1
        while j >= begin and items[j] > pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]

    items[begin], items[j] = items[j], items[begin]
    return j


def quicksort(items: MutableSequence[Any], begin: int = 0, end: int | None = None) -> None:
    """Sort ``items[begin..end]`` (inclusive) in place with a random pivot."""
    if begin > (len(items) - 1 if end is None else end):
        return
    begin, end = _bounds(items, begin, end)
    pending = [(begin, end)]
    while pending:
        lo, hi = pending.pop()
        if lo < hi:
            p = _partition(items, lo, hi)
            pending.append((lo, p - 1))
            pending.append((p + 1, hi))


def selection_sort(items: MutableSequence[Any], start: int = 0, end: int | None = None) -> None:
    """Sort ``items[start..end]`` (inclusive) in place by repeated selection.

    Raises ValueError when an explicit ``end`` lies before ``start``.
    """
    if end is None:
        if not items:
            return
        end = len(items) - 1
    if start > end:
        raise ValueError(f"start {start} lies after end {end}")
    start, end = _bounds(items, start, end)
    for j in range(start, end):
        i_min = min(range(j, end + 1), key=items.__getitem__)
        if i_min != j:
            items[j], items[i_min] = items[i_min], items[j]


def shuffle(items: MutableSequence[Any]) -> None:
    """Shuffle ``items`` in place so that every permutation is equally likely."""
    for i in range(len(items) - 1, 0, -1):
        j = random.randrange(i + 1)
        items[i], items[j] = items[j], items[i]