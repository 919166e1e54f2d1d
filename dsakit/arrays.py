"""Simple array algorithms: prefix sums, duplicate checks and altitude peaks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate


def running_sum(nums: Iterable[int]) -> list[int]:
    """Return the running (prefix) sums of ``nums``."""
    return list(accumulate(nums))


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Return True if any value occurs more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def left_right_sum(nums: Sequence[int]) -> list[int]:
    """Return ``|left[i] - right[i]|`` for each position.

    ``left[i]`` is the sum of ``nums[0..i]`` and ``right[i]`` the sum of
    ``nums[i..]``, both inclusive.
    """
    left = list(accumulate(nums))
    right = list(accumulate(reversed(nums)))[::-1]
    return [abs(l_sum - r_sum) for l_sum, r_sum in zip(left, right)]


def highest_altitude(gains: Iterable[int]) -> int:
    """Return the highest altitude reached, starting at altitude 0."""
    return max(accumulate(gains, initial=0))