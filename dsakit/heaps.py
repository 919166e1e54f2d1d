"""Heap-based algorithms: min-heap insertion, gifts, frequency sort, sticks, median."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable
from math import isqrt
from typing import Any, MutableSequence


def insert_min_heap(heap: MutableSequence[Any], value: Any) -> None:
    """Insert ``value`` into the list-based min heap ``heap`` by sifting up."""
    heap.append(value)
    index = len(heap) - 1
    while index > 0:
        parent = (index - 1) // 2
        if not value < heap[parent]:
            break
        heap[index] = heap[parent]
        index = parent
    heap[index] = value


def heapify(heap: MutableSequence[Any], index: int) -> None:
    """Sift the element at ``index`` down until its subtree is a min heap."""
    size = len(heap)
    while True:
        smallest = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and heap[child] < heap[smallest]:
                smallest = child
        if smallest == index:
            return
        heap[index], heap[smallest] = heap[smallest], heap[index]
        index = smallest


def insert_min_heap_heapify(heap: MutableSequence[Any], value: Any) -> None:
    """Append ``value`` and rebuild the min heap by heapifying every parent."""
    heap.append(value)
    for index in range((len(heap) - 1) // 2, -1, -1):
        heapify(heap, index)


def remaining_gifts(gifts: Iterable[int], k: int) -> int:
    """Replace the richest pile by its integer square root ``k`` times; return the total."""
    pile = [-gift for gift in gifts]
    if any(gift > 0 for gift in pile):
        raise ValueError("gift counts must be non-negative")
    if k > 0 and not pile:
        raise ValueError("no piles to take gifts from")
    heapq.heapify(pile)
    for _ in range(k):
        richest = -heapq.heappop(pile)
        heapq.heappush(pile, -isqrt(richest))
    return -sum(pile)


def frequency_sort(s: str) -> str:
    """Sort characters by descending frequency; ties go to the smaller character."""
    counts = Counter(s)
    order = sorted(counts, key=lambda ch: (-counts[ch], ch))
    return "".join(ch * counts[ch] for ch in order)


def frequency_sort_bucket(s: str) -> str:
    """Sort characters by descending frequency using buckets.

    Characters sharing a frequency appear in order of first occurrence.
    """
    counts = Counter(s)
    if not counts:
        return ""
    buckets: list[list[str]] = [[] for _ in range(max(counts.values()) + 1)]
    for ch, count in counts.items():
        buckets[count].append(ch)
    return "".join(
        ch * count
        for count in range(len(buckets) - 1, 0, -1)
        for ch in buckets[count]
    )


def connect_sticks(sticks: Iterable[int]) -> int:
    """Return the minimum cost of joining all sticks, a join costing their sum."""
    heap = list(sticks)
    heapq.heapify(heap)
    cost = 0
    while len(heap) > 1:
        combined = heapq.heappop(heap) + heapq.heappop(heap)
        cost += combined
        heapq.heappush(heap, combined)
    return cost


class MedianFinder:
    """Keep the running median of inserted numbers with two heaps."""

    def __init__(self) -> None:
        self._low: list[int] = []  # max heap, stored negated
        self._high: list[int] = []  # min heap

    def __len__(self) -> int:
        return len(self._low) + len(self._high)

    def insert(self, num: int) -> None:
        """Add ``num`` to the stream."""
        if not self._low or -self._low[0] >= num:
            heapq.heappush(self._low, -num)
        else:
            heapq.heappush(self._high, num)

        if len(self._low) > len(self._high) + 1:
            heapq.heappush(self._high, -heapq.heappop(self._low))
        elif len(self._high) > len(self._low):
            heapq.heappush(self._low, -heapq.heappop(self._high))

    def median(self) -> float:
        """Return the median of the numbers inserted so far."""
        if not self._low:
            raise ValueError("no numbers inserted")
        if len(self._low) == len(self._high):
            return self._high[0] / 2.0 + -self._low[0] / 2.0
        return float(-self._low[0])