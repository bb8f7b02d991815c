"""A stack built on linked nodes, with an interactive text menu."""

from __future__ import annotations

import sys
from collections.abc import Iterator

from dsalgo.linked_list import Node


class StackUnderflowError(IndexError):
    """Raised when taking from an empty stack."""


class LinkedStack:
    """Last-in first-out stack of values."""

    def __init__(self):
        self._top: Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._top is not None

    def __iter__(self) -> Iterator[int]:
        """Yield values from the top down."""
        node = self._top
        while node is not None:
            yield node.data
            node = node.next

    def push(self, value):
        """Put ``value`` on top."""
        self._top = Node(value, self._top)
        self._size += 1

    def pop(self):
        """Remove and return the top value."""
        if self._top is None:
            raise StackUnderflowError("Stack Underflow")
        value = self._top.data
        self._top = self._top.next
        self._size -= 1
        return value

    def peek(self):
        """Return the top value without removing it."""
        if self._top is None:
            raise StackUnderflowError("Stack Underflow")
        return self._top.data


def _tokens(lines):
    for line in lines:
        yield from line.split()


def run_menu(lines, out):
    """Run the push/pop/display menu over ``lines``, writing to ``out``; return the stack."""
    stack = LinkedStack()
    out.write("1) Push\n2) Pop\n3) Display\n4) Exit\n")
    tokens = _tokens(lines)
    while True:
        out.write("Enter choice: \n")
        choice = next(tokens, None)
        if choice is None:
            break
        if choice == "1":
            out.write("Enter value to be pushed:\n")
            raw = next(tokens, None)
            if raw is None:
                break
            try:
                stack.push(int(raw))
            except ValueError:
                out.write("Invalid value\n")
        elif choice == "2":
            try:
                out.write(f"The popped element is {stack.pop()}\n")
            except StackUnderflowError:
                out.write("Stack Underflow\n")
        elif choice == "3":
            if stack:
                out.write("Stack elements are: " + "".join(f"{v} " for v in stack))
            else:
                out.write("empty stack")
            out.write("\n")
        elif choice == "4":
            out.write("Exit\n")
            break
        else:
            out.write("Incorrect Choice\n")
    return stack


def main(argv=None):
    """Run the menu on standard input and output."""
    run_menu(sys.stdin, sys.stdout)
    return 0