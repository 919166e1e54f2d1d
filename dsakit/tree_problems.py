"""Classic binary-tree problems."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int
    left: Optional["TreeNode"] = field(default=None, repr=False)
    right: Optional["TreeNode"] = field(default=None, repr=False)


def _walk_in_order(root: Optional[TreeNode]) -> Iterator[int]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


def in_order_values(root: Optional[TreeNode]) -> list[int]:
    """Return the values of the tree in left, node, right order."""
    return list(_walk_in_order(root))


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def _balanced_depth(node: Optional[TreeNode]) -> int:
    if node is None:
        return 0
    left = _balanced_depth(node.left)
    if left < 0:
        return -1
    right = _balanced_depth(node.right)
    if right < 0 or abs(left - right) > 1:
        return -1
    return 1 + max(left, right)


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Return True if no node's subtrees differ in depth by more than one."""
    return _balanced_depth(root) != -1


def min_diff_in_bst(root: Optional[TreeNode]) -> int:
    """Return the smallest difference between values of adjacent BST nodes."""
    values = in_order_values(root)
    if len(values) < 2:
        raise ValueError("the tree needs at least two nodes")
    return min(abs(b - a) for a, b in zip(values, values[1:]))


def range_sum_bst(root: Optional[TreeNode], low: int, high: int) -> int:
    """Return the sum of BST values within ``[low, high]``."""
    if root is None:
        return 0
    if root.val < low:
        return range_sum_bst(root.right, low, high)
    if root.val > high:
        return range_sum_bst(root.left, low, high)
    return (
        root.val
        + range_sum_bst(root.left, low, high)
        + range_sum_bst(root.right, low, high)
    )


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """Return the k-th smallest value (1-based) of a BST."""
    if k < 1:
        raise ValueError("k must be at least 1")
    for position, value in enumerate(_walk_in_order(root), start=1):
        if position == k:
            return value
    raise ValueError("k exceeds the number of nodes")


def closest_value(root: Optional[TreeNode], target: float) -> int:
    """Return the BST value closest to ``target``; the first found wins ties."""
    if root is None:
        raise ValueError("the tree is empty")
    closest = root.val
    node: Optional[TreeNode] = root
    while node is not None:
        if abs(target - closest) > abs(target - node.val):
            closest = node.val
        node = node.left if node.val > target else node.right
    return closest


def merge_trees(
    first: Optional[TreeNode], second: Optional[TreeNode]
) -> Optional[TreeNode]:
    """Overlay two trees, summing values where both have a node.

    Where only one tree has a subtree, that subtree is reused as is.
    """
    if first is None:
        return second
    if second is None:
        return first
    node = TreeNode(first.val + second.val)
    node.left = merge_trees(first.left, second.left)
    node.right = merge_trees(first.right, second.right)
    return node