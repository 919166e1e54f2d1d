"""Singly and doubly linked lists and helpers for building them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional, Union


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any = 0
    next: Optional["ListNode"] = field(default=None, repr=False)


@dataclass(eq=False)
class DLNode:
    """A node of a doubly linked list."""

    val: Any = 0
    next: Optional["DLNode"] = field(default=None, repr=False)
    prev: Optional["DLNode"] = field(default=None, repr=False)


def from_values(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a singly linked list holding ``values`` and return its head."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def doubly_from_values(values: Iterable[Any]) -> Optional[DLNode]:
    """Build a doubly linked list holding ``values`` and return its head."""
    head: Optional[DLNode] = None
    tail: Optional[DLNode] = None
    for value in values:
        node = DLNode(value, prev=tail)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def _walk(head: Optional[Union[ListNode, DLNode]]) -> Iterator[Any]:
    node = head
    while node is not None:
        yield node.val
        node = node.next


def to_values(head: Optional[Union[ListNode, DLNode]]) -> list[Any]:
    """Return the values of a linked list, from ``head`` onwards."""
    return list(_walk(head))


class SinglyLinkedList:
    """A singly linked list that grows at the front."""

    def __init__(self) -> None:
        self.head: Optional[ListNode] = None

    def __iter__(self) -> Iterator[Any]:
        return _walk(self.head)

    def insert(self, value: Any) -> ListNode:
        """Insert ``value`` at the front and return its node."""
        self.head = ListNode(value, self.head)
        return self.head

    def insert_after(self, prev_node: Optional[ListNode], value: Any) -> ListNode:
        """Insert ``value`` right after ``prev_node`` and return the new node."""
        if prev_node is None:
            raise ValueError("Previous node cannot be None")
        node = ListNode(value, prev_node.next)
        prev_node.next = node
        return node

    def delete(self, value: Any) -> bool:
        """Remove the first node holding ``value``; return whether one was found."""
        prev: Optional[ListNode] = None
        node = self.head
        while node is not None and node.val != value:
            prev, node = node, node.next
        if node is None:
            return False
        if prev is None:
            self.head = node.next
        else:
            prev.next = node.next
        return True

    def search(self, value: Any) -> bool:
        """Return True if some node holds ``value``."""
        return any(item == value for item in self)


class DoublyLinkedList:
    """A doubly linked list that grows at the front."""

    def __init__(self) -> None:
        self.head: Optional[DLNode] = None

    def __iter__(self) -> Iterator[Any]:
        return _walk(self.head)

    def insert(self, value: Any) -> DLNode:
        """Insert ``value`` at the front and return its node."""
        node = DLNode(value, next=self.head)
        if self.head is not None:
            self.head.prev = node
        self.head = node
        return node

    def insert_after(self, prev_node: Optional[DLNode], value: Any) -> DLNode:
        """Insert ``value`` right after ``prev_node`` and return the new node."""
        if prev_node is None:
            raise ValueError("The given node cannot be None")
        node = DLNode(value, next=prev_node.next, prev=prev_node)
        prev_node.next = node
        if node.next is not None:
            node.next.prev = node
        return node

    def delete(self, value: Any) -> bool:
        """Remove the first node holding ``value``; return whether one was found."""
        node = self.head
        while node is not None:
            if node.val == value:
                if node.prev is not None:
                    node.prev.next = node.next
                else:
                    self.head = node.next
                if node.next is not None:
                    node.next.prev = node.prev
                return True
            node = node.next
        return False

    def search(self, value: Any) -> bool:
        """Return True if some node holds ``value``."""
        return any(item == value for item in self)