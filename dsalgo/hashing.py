"""Hash table that resolves collisions by chaining values in buckets."""

from __future__ import annotations


class ChainedHashTable:
    """Integer hash table with ``size`` buckets and hash ``value % size``."""

    def __init__(self, size=10):
        if size <= 0:
            raise ValueError("table size must be positive")
        self._buckets: list[list[int]] = [[] for _ in range(size)]

    def _bucket(self, value: int) -> list[int]:
        return self._buckets[value % len(self._buckets)]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __contains__(self, value) -> bool:
        return self.search(value) is not None

    def insert(self, value):
        """Append ``value`` to the end of its bucket."""
        self._bucket(value).append(value)

    def search(self, value):
        """Return the position of ``value`` within its bucket, or None."""
        bucket = self._bucket(value)
        try:
            return bucket.index(value)
        except ValueError:
            return None

    def remove(self, value):
        """Remove the first occurrence of ``value``; raise KeyError if absent."""
        bucket = self._bucket(value)
        try:
            bucket.remove(value)
        except ValueError:
            raise KeyError(value) from None

    def buckets(self):
        """Return a copy of every bucket in order."""
        return [list(bucket) for bucket in self._buckets]

    def format(self):
        """Render each bucket as a chain of values."""
        return "\n".join(
            f"{index} --> " + "".join(f"{value} -> " for value in bucket) + "END"
            for index, bucket in enumerate(self._buckets)
        )