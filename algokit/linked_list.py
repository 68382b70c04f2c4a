"""Singly linked lists and the classic operations on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _length(head: Optional[ListNode]) -> int:
    return sum(1 for _ in _nodes(head))


def _advance(node: Optional[ListNode], steps: int) -> Optional[ListNode]:
    for _ in range(steps):
        node = node.next
    return node


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_list(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [] if head is None else list(head)


def intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None."""
    len_a, len_b = _length(head_a), _length(head_b)
    a = _advance(head_a, max(0, len_a - len_b))
    b = _advance(head_b, max(0, len_b - len_a))
    while a is not None:
        if a is b:
            return a
        a, b = a.next, b.next
    return None


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the n-th node counted from the end and return the new head."""
    length = _length(head)
    if not 1 <= n <= length:
        raise ValueError(f"n must be between 1 and {length}, got {n}")
    if n == length:
        return head.next
    prev = _advance(head, length - n - 1)
    prev.next = prev.next.next
    return head


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    prev: Optional[ListNode] = None
    curr = head
    while curr is not None:
        curr.next, prev, curr = prev, curr, curr.next
    return prev


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list; ties take from ``list1`` first."""
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


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list to the right by ``k`` places and return the new head."""
    if head is None or head.next is None or k == 0:
        return head
    length = 1
    tail = head
    while tail.next is not None:
        tail = tail.next
        length += 1
    k %= length
    if k == 0:
        return head
    new_tail = _advance(head, length - k - 1)
    new_head = new_tail.next
    new_tail.next = None
    tail.next = head
    return new_head


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; for an even length, the second of the two middles."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow