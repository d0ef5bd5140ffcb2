"""Singly linked lists and the classic algorithms that work on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from functools import reduce
from itertools import zip_longest
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list.

    Nodes compare by identity, so lists containing cycles can still be
    compared and hashed safely.
    """

    val: int = 0
    next: Optional[ListNode] = field(default=None, repr=False)

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list.

        Iterating over a list that contains a cycle never ends.
        """
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def _values(head: Optional[ListNode]) -> Iterator[int]:
    return iter(head) if head is not None else iter(())


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list as a Python list."""
    return list(_values(head))


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether the list loops back on itself (tortoise and hare)."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def binary_to_int(head: Optional[ListNode]) -> int:
    """Read a list of bits, most significant first, as an integer."""
    return reduce(lambda acc, bit: acc * 2 + bit, _values(head), 0)


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as digit lists, least significant digit first."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    for a, b in zip_longest(_values(l1), _values(l2), fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    if carry:
        tail.next = ListNode(carry)
    return dummy.next


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Unlink every node holding ``val`` and return the new head."""
    dummy = ListNode(next=head)
    prev = dummy
    while prev.next is not None:
        if prev.next.val == val:
            prev.next = prev.next.next
        else:
            prev = prev.next
    return dummy.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    prev: Optional[ListNode] = None
    current = head
    while current is not None:
        current.next, prev, current = prev, current, current.next
    return prev


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list; ties take from ``list1``."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Tell whether the list reads the same forwards and backwards."""
    values = to_values(head)
    return values == values[::-1]


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; for an even length, the second of the two."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    return slow