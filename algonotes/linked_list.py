"""Singly linked lists and the operations that rearrange them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

__all__ = [
    "ListNode",
    "from_values",
    "to_values",
    "odd_even_list",
    "reverse_list",
    "insertion_sort_list",
]


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return list(head) if head is not None else []


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Group the nodes at odd positions before those at even positions.

    Positions count from 1 and the relative order within each group is kept.
    """
    odd_dummy = ListNode(0)
    even_dummy = ListNode(0)
    tails = [odd_dummy, even_dummy]
    take_odd = True
    node = head
    while node is not None:
        following = node.next
        node.next = None
        side = 0 if take_odd else 1
        tails[side].next = node
        tails[side] = node
        take_odd = not take_odd
        node = following
    tails[0].next = even_dummy.next
    return odd_dummy.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    prev: Optional[ListNode] = None
    node = head
    while node is not None:
        node.next, prev, node = prev, node, node.next
    return prev


def insertion_sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the list in ascending order by insertion; equal values keep their order."""
    dummy = ListNode(0)
    node = head
    while node is not None:
        following = node.next
        cursor = dummy
        while cursor.next is not None and cursor.next.val <= node.val:
            cursor = cursor.next
        node.next = cursor.next
        cursor.next = node
        node = following
    return dummy.next