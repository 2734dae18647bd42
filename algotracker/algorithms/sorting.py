"""Comparison sorts over integer lists.

All functions return an ascending list holding the same multiset of values as
the input. Bubble, insertion, selection and quick sort work in place and
return the list they were given; merge sort builds a new list. Callers that
need the original order must pass a copy.
"""

from __future__ import annotations

from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")


def bubble_sort(values: List[int]) -> List[int]:
    """Adjacent-swap sort; stops early after a pass without swaps."""
    n = len(values)
    for i in range(n - 1):
        swapped = False
        for j in range(n - 1 - i):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            break
    return values


def insertion_sort(values: List[int]) -> List[int]:
    for i in range(1, len(values)):
        key = values[i]
        j = i - 1
        while j >= 0 and values[j] > key:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = key
    return values


def selection_sort(values: List[int]) -> List[int]:
    n = len(values)
    for i in range(n - 1):
        min_idx = i
        for j in range(i + 1, n):
            if values[j] < values[min_idx]:
                min_idx = j
        if min_idx != i:
            values[i], values[min_idx] = values[min_idx], values[i]
    return values


def merge_sort_by(items: Sequence[T], key: Callable[[T], int]) -> List[T]:
    """Stable top-down merge sort ordering ``items`` by ``key``.

    Ties keep their input order: when both halves hold equal keys the element
    from the left half is taken first.
    """
    if len(items) <= 1:
        return list(items)
    mid = len(items) // 2
    left = merge_sort_by(items[:mid], key)
    right = merge_sort_by(items[mid:], key)

    merged: List[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if key(right[j]) < key(left[i]):
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: List[int]) -> List[int]:
    return merge_sort_by(values, key=_identity)


def _identity(value: int) -> int:
    return value


def quick_sort(values: List[int]) -> List[int]:
    """In-place quick sort (median-of-three pivot, Hoare partition).

    The smaller partition is handled recursively and the larger one by the
    loop, so the recursion depth stays O(log n) even for adversarial input.
    """
    lo, hi = 0, len(values) - 1
    _quick_sort(values, lo, hi)
    return values


def _quick_sort(values: List[int], lo: int, hi: int) -> None:
    while lo < hi:
        p = _partition(values, lo, hi)
        if p - lo < hi - p:
            _quick_sort(values, lo, p)
            lo = p + 1
        else:
            _quick_sort(values, p + 1, hi)
            hi = p


def _partition(values: List[int], lo: int, hi: int) -> int:
    mid = (lo + hi) // 2
    # order lo, mid, hi so the median ends up at mid
    if values[mid] < values[lo]:
        values[lo], values[mid] = values[mid], values[lo]
    if values[hi] < values[lo]:
        values[lo], values[hi] = values[hi], values[lo]
    if values[hi] < values[mid]:
        values[mid], values[hi] = values[hi], values[mid]
    pivot = values[mid]

    i, j = lo - 1, hi + 1
    while True:
        i += 1
        while values[i] < pivot:
            i += 1
        j -= 1
        while values[j] > pivot:
            j -= 1
        if i >= j:
            return j
        values[i], values[j] = values[j], values[i]
