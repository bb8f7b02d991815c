"""Singly linked lists: a list container and algorithms on chains of nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """One link of a singly linked chain."""

    data: int = 0
    next: Node | None = field(default=None, repr=False)


def _walk(head: Node | None) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


class LinkedList:
    """A singly linked list of values."""

    def __init__(self, values=()):
        self.head: Node | None = from_iterable(values)

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in _walk(self.head))

    def __len__(self) -> int:
        return sum(1 for _ in _walk(self.head))

    def __bool__(self) -> bool:
        return self.head is not None

    def _node_at(self, index: int) -> Node:
        node = self.head
        for _ in range(index):
            node = node.next
        return node

    def push_front(self, value):
        """Add ``value`` before the first element."""
        self.head = Node(value, self.head)

    def push_back(self, value):
        """Add ``value`` after the last element."""
        if self.head is None:
            self.head = Node(value)
            return
        *_, tail = _walk(self.head)
        tail.next = Node(value)

    def pop_front(self):
        """Remove and return the first value; raise IndexError if empty."""
        if self.head is None:
            raise IndexError("pop from empty list")
        value = self.head.data
        self.head = self.head.next
        return value

    def pop_back(self):
        """Remove and return the last value; raise IndexError if empty."""
        if self.head is None:
            raise IndexError("pop from empty list")
        if self.head.next is None:
            value = self.head.data
            self.head = None
            return value
        before = self.head
        while before.next.next is not None:
            before = before.next
        value = before.next.data
        before.next = None
        return value

    def insert(self, index, value):
        """Insert ``value`` so that it ends up at position ``index``."""
        if not 0 <= index <= len(self):
            raise IndexError("index out of bound")
        if index == 0:
            self.push_front(value)
            return
        before = self._node_at(index - 1)
        before.next = Node(value, before.next)

    def assign(self, index, value):
        """Replace the value at position ``index``."""
        if self.head is None:
            raise IndexError("list is empty")
        if not 0 <= index < len(self):
            raise IndexError("index out of bound")
        self._node_at(index).data = value

    def remove_duplicates(self):
        """Drop each value equal to the one just before it."""
        node = self.head
        while node is not None and node.next is not None:
            if node.data == node.next.data:
                node.next = node.next.next
            else:
                node = node.next

    def format(self):
        """Render the list as ``[ a, b, c ]``, or ``List Empty``."""
        if self.head is None:
            return "List Empty"
        return "[ " + ", ".join(str(value) for value in self) + " ]"


def from_iterable(values):
    """Build a chain from ``values`` and return its head, or None if empty."""
    head = None
    for value in reversed(list(values)):
        head = Node(value, head)
    return head


def to_list(head):
    """Return the values of the chain starting at ``head``."""
    if has_cycle(head):
        raise ValueError("list contains a cycle")
    return [node.data for node in _walk(head)]


def merge_sorted(first, second):
    """Merge two ascending chains into one, reusing their nodes."""
    dummy = Node()
    tail = dummy
    while first is not None and second is not None:
        if first.data < second.data:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def middle(head):
    """Cut the chain after its first ``n // 2`` nodes and return the second half."""
    if head is None or head.next is None:
        raise ValueError("a list needs at least two nodes to be split")
    slow = head
    fast = head.next.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    mid = slow.next
    slow.next = None
    return mid


def merge_sort(head):
    """Sort the chain in ascending order and return its new head."""
    if head is None or head.next is None:
        return head
    mid = middle(head)
    return merge_sorted(merge_sort(head), merge_sort(mid))


def reverse(head):
    """Reverse the chain in place and return its new head."""
    previous = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous


def is_palindrome(head):
    """Return whether the chain reads the same both ways; the chain is left intact."""
    if head is None or head.next is None:
        return True
    reversed_half = reverse(middle(head))
    result = all(
        a.data == b.data for a, b in zip(_walk(head), _walk(reversed_half))
    )
    *_, tail = _walk(head)
    tail.next = reverse(reversed_half)
    return result


def has_cycle(head):
    """Return whether following ``next`` from ``head`` ever repeats a node."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def link_tail_to(head, position):
    """Point the tail at the node at 1-based ``position``; 0 leaves the chain alone."""
    if position == 0:
        return
    if head is None:
        raise ValueError("cannot link the tail of an empty list")
    if has_cycle(head):
        raise ValueError("list already contains a cycle")
    nodes = list(_walk(head))
    if not 1 <= position <= len(nodes):
        raise IndexError("position out of bound")
    nodes[-1].next = nodes[position - 1]