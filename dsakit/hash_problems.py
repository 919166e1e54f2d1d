"""Problems solved by counting characters or numbers in a hash map."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def first_unique_char(s: str) -> int:
    """Return the index of the first character occurring once in ``s``, or -1."""
    counts = Counter(s)
    return next((index for index, ch in enumerate(s) if counts[ch] == 1), -1)


def largest_unique_number(nums: Iterable[int]) -> int:
    """Return the largest value occurring exactly once, never less than -1.

    If no value occurs once, -1 is returned.
    """
    counts = Counter(nums)
    return max([-1, *(value for value, count in counts.items() if count == 1)])


def max_number_of_balloons(text: str) -> int:
    """Return how many times the word "balloon" can be formed from ``text``."""
    counts = Counter(text)
    return min(
        counts["b"],
        counts["a"],
        counts["l"] // 2,
        counts["o"] // 2,
        counts["n"],
    )


def longest_palindrome(s: str) -> int:
    """Return the length of the longest palindrome buildable from the letters of ``s``."""
    length = 0
    has_odd = False
    for count in Counter(s).values():
        length += count - count % 2
        if count % 2:
            has_odd = True
    return length + 1 if has_odd else length


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Return True if ``ransom_note`` can be spelt with the letters of ``magazine``."""
    available = Counter(magazine)
    return all(available[ch] >= needed for ch, needed in Counter(ransom_note).items())