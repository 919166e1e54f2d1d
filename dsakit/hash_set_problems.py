"""Problems solved with hash sets."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def count_elements(nums: Sequence[int]) -> int:
    """Count the elements ``x`` for which ``x + 1`` is also present."""
    present = set(nums)
    return sum(1 for x in nums if x + 1 in present)


def num_jewels_in_stones(jewels: str, stones: str) -> int:
    """Count the stones whose type appears among ``jewels``."""
    jewel_set = set(jewels)
    return sum(1 for stone in stones if stone in jewel_set)


def unique_occurrences(nums: Iterable[int]) -> bool:
    """Return True if every distinct value occurs a different number of times."""
    counts = Counter(nums).values()
    return len(counts) == len(set(counts))


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeats (brute force)."""
    best = 0
    for start in range(len(s)):
        seen: set[str] = set()
        for ch in s[start:]:
            if ch in seen:
                break
            seen.add(ch)
        best = max(best, len(seen))
    return best


def length_of_longest_substring_window(s: str) -> int:
    """Return the length of the longest substring without repeats (sliding window)."""
    window: set[str] = set()
    best = start = end = 0
    while end < len(s):
        if s[end] not in window:
            window.add(s[end])
            end += 1
            best = max(best, end - start)
        else:
            window.discard(s[start])
            start += 1
    return best