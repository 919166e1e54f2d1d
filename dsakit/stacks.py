"""Stack implementations: list-backed, linked and fixed-capacity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """An unbounded LIFO stack backed by a list."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        if self.is_empty():
            raise IndexError("Stack is empty")
        return self._items.pop()

    def peek(self) -> T:
        if self.is_empty():
            raise IndexError("Stack is empty")
        return self._items[-1]


@dataclass(slots=True)
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedStack(Generic[T]):
    """A LIFO stack built from singly linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._top is None

    def push(self, item: T) -> None:
        self._top = _Node(item, self._top)
        self._size += 1

    def pop(self) -> T:
        if self._top is None:
            raise IndexError("Stack underflow: stack empty")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self) -> T:
        if self._top is None:
            raise IndexError("Stack is empty")
        return self._top.data


class BoundedStack(Generic[T]):
    """A LIFO stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def push(self, item: T) -> None:
        if self.is_full():
            raise IndexError("Stack is full")
        self._items.append(item)

    def pop(self) -> T:
        if self.is_empty():
            raise IndexError("Stack is empty")
        return self._items.pop()

    def peek(self) -> T:
        if self.is_empty():
            raise IndexError("Stack is Empty")
        return self._items[-1]