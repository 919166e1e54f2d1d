"""Classic linked-list problems."""

from __future__ import annotations

from typing import Optional

from dsakit.linked_list import DLNode, ListNode


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a singly linked list in place and return the new head."""
    prev: Optional[ListNode] = None
    node = head
    while node is not None:
        node.next, prev, node = prev, node, node.next
    return prev


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop repeated values from a sorted list in place and return its head."""
    node = head
    while node is not None and node.next is not None:
        if node.val == node.next.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def merge_two_lists(
    first: Optional[ListNode], second: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list.

    On equal values the node from ``second`` comes first.
    """
    dummy = ListNode()
    tail = dummy
    while first is not None and second is not None:
        if first.val < second.val:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def is_palindrome(head: Optional[DLNode]) -> bool:
    """Return True if a doubly linked list reads the same both ways."""
    if head is None:
        return True
    tail = head
    while tail.next is not None:
        tail = tail.next
    left, right = head, tail
    while left is not right and left.prev is not right:
        if left.val != right.val:
            return False
        left, right = left.next, right.prev
    return True


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(next=head)
    prev = dummy
    while head is not None and head.next is not None:
        first, second = head, head.next
        first.next = second.next
        second.next = first
        prev.next = second
        prev, head = first, first.next
    return dummy.next