"""A binary search tree with insertion, deletion, search and traversals."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _in_order(node: Optional[_Node]) -> Iterator[Any]:
    if node is not None:
        yield from _in_order(node.left)
        yield node.value
        yield from _in_order(node.right)


def _pre_order(node: Optional[_Node]) -> Iterator[Any]:
    if node is not None:
        yield node.value
        yield from _pre_order(node.left)
        yield from _pre_order(node.right)


def _post_order(node: Optional[_Node]) -> Iterator[Any]:
    if node is not None:
        yield from _post_order(node.left)
        yield from _post_order(node.right)
        yield node.value


def _find_min(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


class BinarySearchTree:
    """An unbalanced binary search tree; equal values go to the right."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        return self.search(value)

    def __iter__(self) -> Iterator[Any]:
        return _in_order(self._root)

    def insert(self, value: Any) -> None:
        """Add ``value`` to the tree."""
        node = _Node(value)
        self._size += 1
        if self._root is None:
            self._root = node
            return
        parent = self._root
        while True:
            if value < parent.value:
                if parent.left is None:
                    parent.left = node
                    return
                parent = parent.left
            else:
                if parent.right is None:
                    parent.right = node
                    return
                parent = parent.right

    def _delete(self, node: Optional[_Node], value: Any) -> tuple[Optional[_Node], bool]:
        if node is None:
            return None, False
        if value < node.value:
            node.left, removed = self._delete(node.left, value)
            return node, removed
        if value > node.value:
            node.right, removed = self._delete(node.right, value)
            return node, removed
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        successor = _find_min(node.right)
        node.value = successor.value
        node.right, _ = self._delete(node.right, successor.value)
        return node, True

    def delete(self, value: Any) -> bool:
        """Remove one occurrence of ``value``; return whether it was present."""
        self._root, removed = self._delete(self._root, value)
        if removed:
            self._size -= 1
        return removed

    def search(self, value: Any) -> bool:
        """Return True if ``value`` is stored in the tree."""
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def in_order(self) -> list[Any]:
        """Return the values in left, node, right order (sorted)."""
        return list(_in_order(self._root))

    def pre_order(self) -> list[Any]:
        """Return the values in node, left, right order."""
        return list(_pre_order(self._root))

    def post_order(self) -> list[Any]:
        """Return the values in left, right, node order."""
        return list(_post_order(self._root))