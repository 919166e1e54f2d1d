"""Classic problems solved with queues and deques."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


def reverse_queue(queue: Iterable[T]) -> deque[T]:
    """Return a new queue holding the items of ``queue`` in reverse order."""
    stack = list(queue)
    reversed_queue: deque[T] = deque()
    while stack:
        reversed_queue.append(stack.pop())
    return reversed_queue


def generate_binary_numbers(n: int) -> list[str]:
    """Return the binary representations of 1 to ``n`` in order."""
    if n < 0:
        raise ValueError("n must be non-negative")
    pending: deque[str] = deque(["1"])
    result: list[str] = []
    for _ in range(n):
        front = pending.popleft()
        result.append(front)
        pending.extend((front + "0", front + "1"))
    return result


def is_palindrome(text: str) -> bool:
    """Return True if the alphanumeric characters of ``text`` read the same both ways, ignoring case."""
    chars = deque(ch.lower() for ch in text if ch.isalnum())
    while len(chars) > 1:
        if chars.popleft() != chars.pop():
            return False
    return True


class ZigzagIterator(Generic[T], Iterator[T]):
    """Iterate over two sequences alternately until both are exhausted."""

    def __init__(self, first: Iterable[T], second: Iterable[T]) -> None:
        self._pending: deque[deque[T]] = deque(
            items for items in (deque(first), deque(second)) if items
        )

    def __iter__(self) -> "ZigzagIterator[T]":
        return self

    def __next__(self) -> T:
        if not self._pending:
            raise StopIteration
        current = self._pending.popleft()
        value = current.popleft()
        if current:
            self._pending.append(current)
        return value

    def has_next(self) -> bool:
        return bool(self._pending)


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every contiguous window of size ``k``."""
    if k < 1 or k > len(nums):
        raise ValueError("k must be between 1 and len(nums)")
    window: deque[int] = deque()
    result: list[int] = []
    for index, value in enumerate(nums):
        while window and window[0] <= index - k:
            window.popleft()
        while window and nums[window[-1]] <= value:
            window.pop()
        window.append(index)
        if index >= k - 1:
            result.append(nums[window[0]])
    return result