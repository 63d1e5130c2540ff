"""Singly linked lists and the list problems that work on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Build a list from values; an empty iterable gives None."""
        head: Optional[ListNode] = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def __iter__(self) -> Iterator[ListNode]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next

    def to_list(self) -> list[int]:
        """Return the values from this node to the end of the list."""
        return [node.val for node in self]


def _values(head: Optional[ListNode]) -> Iterator[int]:
    if head is not None:
        for node in head:
            yield node.val


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as reversed digit lists; returns a new list."""
    digits: list[int] = []
    carry = 0
    first, second = _values(l1), _values(l2)
    sentinel = object()
    while True:
        a = next(first, sentinel)
        b = next(second, sentinel)
        if a is sentinel and b is sentinel:
            break
        total = carry
        if a is not sentinel:
            total += a
        if b is not sentinel:
            total += b
        carry = 1 if total >= 10 else 0
        digits.append(total % 10)
    if carry:
        digits.append(1)
    return ListNode.from_values(digits)


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the n-th node from the end and return the new head.

    Raises ValueError when n is not between 1 and the list's length.
    """
    length = 0 if head is None else sum(1 for _ in head)
    if not 1 <= n <= length:
        raise ValueError(f"n must be between 1 and {length}, got {n}")
    dummy = ListNode(0, head)
    before = dummy
    for _ in range(length - n):
        before = before.next  # type: ignore[assignment]
    removed = before.next
    assert removed is not None
    before.next = removed.next
    removed.next = None
    return dummy.next


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list; on ties list2 goes first."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Remove adjacent repeated values from a sorted list, in place."""
    if head is None:
        return None
    last = head
    while last.next is not None:
        if last.next.val == last.val:
            last.next = last.next.next
        else:
            last = last.next
    return head