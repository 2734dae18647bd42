"""Linear and binary search over integer sequences."""

from __future__ import annotations

from typing import Sequence

from algotracker.algorithms.base import NOT_FOUND


def linear_search(values: Sequence[int], target: int) -> int:
    """Return the first index holding ``target`` or ``-1``."""
    for idx, value in enumerate(values):
        if value == target:
            return idx
    return NOT_FOUND


def binary_search(values: Sequence[int], target: int) -> int:
    """Iterative binary search.

    Precondition: ``values`` is sorted ascending. This is not checked; on
    unsorted input the result is unspecified. With duplicates any index whose
    value equals ``target`` may be returned.
    """
    lo, hi = 0, len(values) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            lo = mid + 1
        else:
            hi = mid - 1
    return NOT_FOUND
