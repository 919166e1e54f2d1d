"""Merge sort and quick sort."""

from __future__ import annotations

from typing import Any, MutableSequence, Sequence


def merge_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place using merge sort."""
    if len(items) <= 1:
        return

    mid = len(items) // 2
    left = list(items[:mid])
    right = list(items[mid:])
    merge_sort(left)
    merge_sort(right)

    i = j = 0
    merged = []
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    items[:] = merged


def quick_sort(items: Sequence[Any]) -> list[Any]:
    """Return a new sorted list using a three-way partitioning quick sort."""
    if len(items) <= 1:
        return list(items)

    pivot = items[len(items) // 2]
    left = [x for x in items if x < pivot]
    middle = [x for x in items if not x < pivot and not x > pivot]
    right = [x for x in items if x > pivot]
    return quick_sort(left) + middle + quick_sort(right)