"""An open-addressing hash set of non-zero integers using linear probing."""

from __future__ import annotations


class HashTableFullError(Exception):
    """Raised when no free slot can be found for a new value."""


class LinearProbingHashTable:
    """A hash set that grows by doubling once its load passes a threshold.

    Zero is reserved and cannot be stored. Deleting a value simply frees its
    slot, without leaving a marker behind.
    """

    def __init__(self, size: int, load_factor_threshold: float = 1.0) -> None:
        if size < 1:
            raise ValueError("table size must be at least 1")
        self.slots: list[int | None] = [None] * size
        self.load_factor_threshold = load_factor_threshold
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __contains__(self, value: int) -> bool:
        return self.search(value)

    @staticmethod
    def _check(value: int) -> None:
        if value == 0:
            raise ValueError("0 is not allowed")

    def probe(self, value: int) -> int | None:
        """Return the slot holding ``value`` or the first free slot on its chain.

        Return None if every slot was visited without finding either.
        """
        size = len(self.slots)
        start = value % size
        for offset in range(size):
            index = (start + offset) % size
            slot = self.slots[index]
            if slot is None or slot == value:
                return index
        return None

    def search(self, value: int) -> bool:
        """Return True if ``value`` is stored."""
        index = self.probe(value)
        return index is not None and self.slots[index] == value

    def insert(self, value: int) -> bool:
        """Store ``value``; return False if it was already present.

        Raise ValueError for 0 and HashTableFullError if no slot is free.
        """
        self._check(value)
        if self.search(value):
            return False
        if (self._count + 1) / len(self.slots) > self.load_factor_threshold:
            self.rehash()
        index = self.probe(value)
        if index is None:
            raise HashTableFullError(f"no free slot for {value}")
        self.slots[index] = value
        self._count += 1
        return True

    def delete(self, value: int) -> bool:
        """Remove ``value``; return False if it was not present.

        Raise ValueError for 0.
        """
        self._check(value)
        index = self.probe(value)
        if index is None or self.slots[index] != value:
            return False
        self.slots[index] = None
        self._count -= 1
        return True

    def rehash(self) -> None:
        """Double the table size and reinsert every stored value."""
        stored = [value for value in self.slots if value is not None]
        self.slots = [None] * (2 * len(self.slots))
        self._count = 0
        for value in stored:
            self.insert(value)

    def load_factor(self) -> float:
        """Return the ratio of stored values to slots."""
        return self._count / len(self.slots)

    def display(self) -> str:
        """Return a summary line followed by one line per slot."""
        lines = [
            f"Current table size: {len(self.slots)}. "
            f"Number of keys: {self._count}. "
            f"Current Load: {self.load_factor():g}. "
            f"Load factor threshold: {self.load_factor_threshold:g}. "
        ]
        lines.extend(
            f"[{index}] {value if value is not None else 0}"
            for index, value in enumerate(self.slots)
        )
        return "\n".join(lines)