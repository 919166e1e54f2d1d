"""Queue implementations and a stack built from queues."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedQueue(Generic[T]):
    """A FIFO queue built from singly linked nodes."""

    def __init__(self) -> None:
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._front
        while node is not None:
            yield node.data
            node = node.next

    def is_empty(self) -> bool:
        return self._size == 0

    def enqueue(self, item: T) -> None:
        node = _Node(item)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> T:
        if self._front is None:
            raise IndexError("Queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.data

    def peek(self) -> T:
        if self._front is None:
            raise IndexError("Queue is empty")
        return self._front.data


class CircularQueue(Generic[T]):
    """A fixed-capacity FIFO queue stored in a ring buffer."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[Optional[T]] = [None] * capacity
        self._front = 0
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for offset in range(self._size):
            yield self._slots[(self._front + offset) % self.capacity]  # type: ignore[misc]

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def enqueue(self, item: T) -> None:
        if self.is_full():
            raise IndexError("Queue is full")
        self._slots[(self._front + self._size) % self.capacity] = item
        self._size += 1

    def dequeue(self) -> T:
        if self.is_empty():
            raise IndexError("Queue is empty")
        item = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        return item  # type: ignore[return-value]


class QueueStack(Generic[T]):
    """A LIFO stack implemented with two FIFO queues."""

    def __init__(self) -> None:
        self._queue: deque[T] = deque()
        self._aux: deque[T] = deque()

    def __len__(self) -> int:
        return len(self._queue)

    def push(self, item: T) -> None:
        self._aux.append(item)
        while self._queue:
            self._aux.append(self._queue.popleft())
        self._queue, self._aux = self._aux, self._queue

    def pop(self) -> T:
        if not self._queue:
            raise IndexError("Stack is empty")
        return self._queue.popleft()