"""Bubble, quick (Lomuto) and merge sort, recorded as step sequences."""

from __future__ import annotations

from typing import Sequence

from .recorder import SortRecorder
from .trace_types import SortStep


def _bubble_sorted_suffix(n: int, pass_index: int) -> range:
    # Derived from the pass index alone, so it can run ahead of the values
    # that are actually final.
    return range(n - 1, pass_index, -1)


def bubble_sort(values: Sequence[int]) -> list[SortStep]:
    """Adjacent-pass bubble sort.

    Every comparison gets a compare step; an out-of-order pair additionally
    gets a swap step showing the pre-swap values before the swap is applied.
    """
    rec = SortRecorder(values)
    n = len(rec)

    for i in range(n - 1):
        suffix = _bubble_sorted_suffix(n, i)
        for j in range(n - i - 1):
            rec.emit(comparing=(j, j + 1), sorted_indices=suffix)
            if rec.array[j] > rec.array[j + 1]:
                rec.emit(swapping=(j, j + 1), sorted_indices=suffix)
                rec.swap(j, j + 1)

    return rec.finish()


def _partition(rec: SortRecorder, low: int, high: int) -> int:
    """Lomuto partition around ``array[high]``; returns the pivot's final index."""
    pivot_value = rec.array[high]
    rec.emit(pivot=high)

    boundary = low - 1
    for j in range(low, high):
        rec.emit(comparing=(j, high), pivot=high)
        if rec.array[j] < pivot_value:
            boundary += 1
            if boundary != j:
                rec.emit(swapping=(boundary, j), pivot=high)
                rec.swap(boundary, j)

    # Placement swap is always shown, even when it swaps the pivot with itself
    rec.emit(swapping=(boundary + 1, high), pivot=high)
    rec.swap(boundary + 1, high)
    return boundary + 1


def quick_sort(values: Sequence[int]) -> list[SortStep]:
    """Quick sort, left partition before right.

    Ranges wait on an explicit stack, so already-sorted input of any length
    does not hit the recursion limit.
    """
    rec = SortRecorder(values)
    ranges = [(0, len(rec) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low < high:
            pivot_index = _partition(rec, low, high)
            ranges.append((pivot_index + 1, high))
            ranges.append((low, pivot_index - 1))
    return rec.finish()


def _merge(rec: SortRecorder, left: int, mid: int, right: int) -> None:
    left_half = rec.array[left : mid + 1]
    right_half = rec.array[mid + 1 : right + 1]

    i = j = 0
    k = left
    while i < len(left_half) and j < len(right_half):
        rec.emit(comparing=(left + i, mid + 1 + j))
        if left_half[i] <= right_half[j]:
            rec.array[k] = left_half[i]
            i += 1
        else:
            rec.array[k] = right_half[j]
            j += 1
        k += 1
        rec.emit()

    # Drains: one plain write step per element
    for value in left_half[i:] + right_half[j:]:
        rec.array[k] = value
        k += 1
        rec.emit()


def _merge_sort(rec: SortRecorder, left: int, right: int) -> None:
    if left >= right:
        return
    mid = (left + right) // 2
    _merge_sort(rec, left, mid)
    _merge_sort(rec, mid + 1, right)
    _merge(rec, left, mid, right)


def merge_sort(values: Sequence[int]) -> list[SortStep]:
    """Top-down merge sort; comparison indices are in whole-array coordinates."""
    rec = SortRecorder(values)
    _merge_sort(rec, 0, len(rec) - 1)
    return rec.finish()
