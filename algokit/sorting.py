"""Comparison sorts: merge sort and quicksort."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from typing import Any


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the items in ascending order; equal items keep their order."""
    values = list(items)
    if len(values) <= 1:
        return values
    middle = (len(values) + 1) // 2
    return list(heapq.merge(merge_sort(values[:middle]), merge_sort(values[middle:])))


def _partition(values: list[Any], low: int, high: int) -> int:
    pivot = values[low]
    i, j = low + 1, high
    while i <= j:
        while i <= high and values[i] <= pivot:
            i += 1
        while j >= low and values[j] > pivot:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
    values[low], values[j] = values[j], values[low]
    return j


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the items in ascending order, using first-element pivots."""
    values = list(items)
    ranges = [(0, len(values) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low < high:
            pivot_index = _partition(values, low, high)
            ranges.append((pivot_index + 1, high))
            ranges.append((low, pivot_index - 1))
    return values