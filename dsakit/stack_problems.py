"""Classic problems solved with a stack."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def is_valid_parentheses(s: str) -> bool:
    """Return True if every bracket in ``s`` is closed in the right order.

    Any character that is not an opening bracket is treated as a closer and
    consumes the most recent opener.
    """
    if len(s) % 2:
        return False
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
            continue
        if not stack:
            return False
        top = stack.pop()
        expected = _PAIRS.get(ch)
        if expected is not None and top != expected:
            return False
    return not stack


def reverse_string(s: str) -> str:
    """Return ``s`` reversed by pushing its characters on a stack."""
    stack = list(s)
    return "".join(stack.pop() for _ in range(len(stack)))


def binary_string(num: int) -> str:
    """Return the binary representation of a non-negative integer."""
    if num < 0:
        raise ValueError("binary_string requires a non-negative number")
    if num <= 1:
        return str(num)
    digits: list[str] = []
    while num > 1:
        digits.append(str(num % 2))
        num //= 2
    digits.append("1")
    return "".join(reversed(digits))


def next_greater_elements(nums: Sequence[int]) -> list[int]:
    """For each value return the next strictly greater value to its right, or -1."""
    result = [-1] * len(nums)
    stack: list[int] = []
    for index, value in reversed(list(enumerate(nums))):
        while stack and stack[-1] < value:
            stack.pop()
        if stack and stack[-1] > value:
            result[index] = stack[-1]
        stack.append(value)
    return result


def sort_stack(stack: Iterable[int]) -> list[int]:
    """Sort a stack (given bottom to top) using a second stack.

    The returned stack, also bottom to top, has its largest value on top.
    The input is not modified.
    """
    source = list(stack)
    result: list[int] = []
    while source:
        top = source.pop()
        while result and top < result[-1]:
            source.append(result.pop())
        result.append(top)
    return result


def _insert_sorted(stack: list[int], value: int) -> None:
    if not stack or stack[-1] >= value:
        stack.append(value)
        return
    held = stack.pop()
    _insert_sorted(stack, value)
    stack.append(held)


def sort_stack_recursive(stack: Iterable[int]) -> list[int]:
    """Sort a stack (given bottom to top) by recursive insertion.

    The returned stack, bottom to top, has its smallest value on top.
    The input is not modified.
    """
    source = list(stack)
    result: list[int] = []
    while source:
        _insert_sorted(result, source.pop())
    return result


def simplify_path(path: str) -> str:
    """Return the canonical form of a Unix-style absolute path."""
    if not path:
        return path
    parts: list[str] = []
    for part in path.split("/"):
        if part == "..":
            if parts:
                parts.pop()
        elif part and part != ".":
            parts.append(part)
    return "/" + "/".join(parts) if parts else "/"


def remove_duplicates(s: str) -> str:
    """Repeatedly remove adjacent equal pairs of characters."""
    stack: list[str] = []
    for ch in s:
        if stack and stack[-1] == ch:
            stack.pop()
        else:
            stack.append(ch)
    return "".join(stack)


def remove_stars(s: str) -> str:
    """Let each ``*`` delete the closest kept character to its left.

    A star with nothing to its left is kept.
    """
    stack: list[str] = []
    for ch in s:
        if stack and ch == "*":
            stack.pop()
        else:
            stack.append(ch)
    return "".join(stack)


def make_good(s: str) -> str:
    """Remove adjacent pairs that are the same letter in different case."""
    stack: list[str] = []
    for ch in s:
        if stack and stack[-1] != ch and stack[-1].lower() == ch.lower():
            stack.pop()
        else:
            stack.append(ch)
    return "".join(stack)