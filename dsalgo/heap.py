"""Fixed-capacity binary min-heap and max-heap."""

from __future__ import annotations

import operator


class HeapFullError(Exception):
    """Raised when inserting into a heap that is at capacity."""


def _sift_down(arr: list, i: int, size: int, before) -> None:
    while True:
        left, right = 2 * i + 1, 2 * i + 2
        best = i
        if left < size and before(arr[left], arr[best]):
            best = left
        if right < size and before(arr[right], arr[best]):
            best = right
        if best == i:
            return
        arr[i], arr[best] = arr[best], arr[i]
        i = best


def _sift_up(arr: list, i: int, before) -> int:
    while i > 0:
        parent = (i - 1) // 2
        if not before(arr[i], arr[parent]):
            break
        arr[i], arr[parent] = arr[parent], arr[i]
        i = parent
    return i


class _BinaryHeap:
    _before = staticmethod(operator.lt)

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._arr: list[int] = []

    def __len__(self) -> int:
        return len(self._arr)

    def __bool__(self) -> bool:
        return bool(self._arr)

    def insert(self, value):
        """Add ``value``; raise HeapFullError at capacity."""
        if len(self._arr) == self._capacity:
            raise HeapFullError("heap full")
        self._arr.append(value)
        _sift_up(self._arr, len(self._arr) - 1, self._before)

    def peek(self):
        """Return the root value; raise IndexError if empty."""
        if not self._arr:
            raise IndexError("heap is empty")
        return self._arr[0]

    def _extract(self) -> int:
        if not self._arr:
            raise IndexError("heap is empty")
        root = self._arr[0]
        last = self._arr.pop()
        if self._arr:
            self._arr[0] = last
            _sift_down(self._arr, 0, len(self._arr), self._before)
        return root

    def search(self, value):
        """Return the array index of ``value``, or None."""
        try:
            return self._arr.index(value)
        except ValueError:
            return None

    def delete(self, value):
        """Remove one occurrence of ``value`` and return it; raise KeyError if absent."""
        index = self.search(value)
        if index is None:
            raise KeyError(value)
        removed = self._arr[index]
        last = self._arr.pop()
        if index < len(self._arr):
            self._arr[index] = last
            index = _sift_up(self._arr, index, self._before)
            _sift_down(self._arr, index, len(self._arr), self._before)
        return removed

    def items(self):
        """Return the heap contents in array order."""
        return list(self._arr)


class MinHeap(_BinaryHeap):
    """Binary heap whose root is its smallest value."""

    _before = staticmethod(operator.lt)

    def __init__(self, capacity):
        super().__init__(capacity)

    def insert(self, value):
        """Add ``value``; raise HeapFullError at capacity."""
        super().insert(value)

    def peek(self):
        """Return the smallest value; raise IndexError if empty."""
        return super().peek()

    def extract_min(self):
        """Remove and return the smallest value; raise IndexError if empty."""
        return self._extract()

    def delete(self, value):
        """Remove one occurrence of ``value`` and return it; raise KeyError if absent."""
        return super().delete(value)

    def search(self, value):
        """Return the array index of ``value``, or None."""
        return super().search(value)

    def items(self):
        """Return the heap contents in array order."""
        return super().items()


class MaxHeap(_BinaryHeap):
    """Binary heap whose root is its largest value."""

    _before = staticmethod(operator.gt)

    def __init__(self, capacity):
        super().__init__(capacity)

    def insert(self, value):
        """Add ``value``; raise HeapFullError at capacity."""
        super().insert(value)

    def peek(self):
        """Return the largest value; raise IndexError if empty."""
        return super().peek()

    def extract_max(self):
        """Remove and return the largest value; raise IndexError if empty."""
        return self._extract()

    def delete(self, value):
        """Remove one occurrence of ``value`` and return it; raise KeyError if absent."""
        return super().delete(value)

    def search(self, value):
        """Return the array index of ``value``, or None."""
        return super().search(value)

    def items(self):
        """Return the heap contents in array order."""
        return super().items()

    def heap_sort(self):
        """Return the values in ascending order by heapsort; the heap is unchanged."""
        arr = list(self._arr)
        for end in range(len(arr) - 1, 0, -1):
            arr[0], arr[end] = arr[end], arr[0]
            _sift_down(arr, 0, end, self._before)
        return arr