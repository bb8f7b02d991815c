"""Open-addressing hash tables: double hashing and linear probing."""

from __future__ import annotations


class TableFullError(Exception):
    """Raised when a value cannot be placed in an open-addressing table."""


class _OpenTable:
    def __init__(self, size: int):
        if size <= 0:
            raise ValueError("table size must be positive")
        self._slots: list[int | None] = [None] * size
        self._count = 0

    def _probe(self, value: int, i: int) -> int:
        raise NotImplementedError

    def _probes(self, value: int):
        return (self._probe(value, i) for i in range(len(self._slots)))

    def __len__(self) -> int:
        return self._count

    def __contains__(self, value) -> bool:
        return self.search(value) is not None

    def insert(self, value):
        """Store ``value`` in the first free slot of its probe sequence."""
        if self._count == len(self._slots):
            raise TableFullError(f"{value} not added, table is full")
        for key in self._probes(value):
            if self._slots[key] is None:
                self._slots[key] = value
                self._count += 1
                return key
        raise TableFullError(f"{value} not added, no free slot on its probe sequence")

    def search(self, value):
        """Return the slot holding ``value``, or None."""
        for key in self._probes(value):
            if self._slots[key] == value:
                return key
        return None

    def remove(self, value):
        """Empty the slot holding ``value``; raise KeyError if absent."""
        key = self.search(value)
        if key is None:
            raise KeyError(value)
        self._slots[key] = None
        self._count -= 1

    def slots(self):
        """Return the slot contents, None marking an empty slot."""
        return list(self._slots)


class DoubleHashTable(_OpenTable):
    """Probes ``(value % size + i * (prime - value % prime)) % size``."""

    def __init__(self, size=17, prime=11):
        super().__init__(size)
        if prime <= 0:
            raise ValueError("prime must be positive")
        self._prime = prime

    def _probe(self, value: int, i: int) -> int:
        size = len(self._slots)
        return (value % size + i * (self._prime - value % self._prime)) % size

    def insert(self, value):
        """Store ``value`` in the first free slot of its probe sequence."""
        return super().insert(value)

    def search(self, value):
        """Return the slot holding ``value``, or None."""
        return super().search(value)

    def remove(self, value):
        """Empty the slot holding ``value``; raise KeyError if absent."""
        super().remove(value)

    def slots(self):
        """Return the slot contents, None marking an empty slot."""
        return super().slots()


class LinearProbingTable(_OpenTable):
    """Probes ``(value % size + i) % size``."""

    def __init__(self, size=128):
        super().__init__(size)

    def _probe(self, value: int, i: int) -> int:
        size = len(self._slots)
        return (value % size + i) % size

    def insert(self, value):
        """Store ``value`` in the first free slot at or after its hash."""
        return super().insert(value)

    def search(self, value):
        """Return the slot holding ``value``, or None."""
        return super().search(value)

    def remove(self, value):
        """Empty the slot holding ``value``; raise KeyError if absent."""
        super().remove(value)

    def slots(self):
        """Return the slot contents, None marking an empty slot."""
        return super().slots()