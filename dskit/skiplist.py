"""A skip list: a sorted set with probabilistic express lanes."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass(eq=False)
class SkipNode:
    """A node linked at levels ``0`` to ``len(next) - 1``."""

    value: Any
    next: list[SkipNode | None] = field(default_factory=list)

    @classmethod
    def with_level(cls, value: Any, level: int) -> SkipNode:
        return cls(value, [None] * (level + 1))


class SkipList:
    """A sorted set of distinct values stored in a skip list."""

    def __init__(self, max_level: int, rng: random.Random | None = None) -> None:
        if max_level < 0:
            raise ValueError("maximum level must not be negative")
        self.max_level = max_level
        self.rng = rng if rng is not None else random.Random()
        self.highest_level = 0
        self.head = SkipNode.with_level(None, max_level)
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head.next[0]
        while node is not None:
            yield node.value
            node = node.next[0]

    def __contains__(self, value: Any) -> bool:
        return self.search(value)

    def random_level(self) -> int:
        """Return a level by repeated coin flips, capped at ``max_level``."""
        level = 0
        while self.rng.random() < 0.5 and level < self.max_level:
            level += 1
        return level

    def _predecessors(self, value: Any) -> list[SkipNode]:
        update = [self.head] * (self.max_level + 1)
        current = self.head
        for level in range(self.highest_level, -1, -1):
            while (
                current.next[level] is not None
                and current.next[level].value < value
            ):
                current = current.next[level]
            update[level] = current
        return update

    def insert(self, value: Any) -> bool:
        """Insert ``value``; return False if it was already present."""
        update = self._predecessors(value)
        candidate = update[0].next[0]
        if candidate is not None and candidate.value == value:
            return False
        level = self.random_level()
        if level > self.highest_level:
            self.highest_level = level
        node = SkipNode.with_level(value, level)
        for index in range(level + 1):
            node.next[index] = update[index].next[index]
            update[index].next[index] = node
        self._size += 1
        return True

    def delete(self, value: Any) -> bool:
        """Remove ``value``; return False if it was not present."""
        update = self._predecessors(value)
        target = update[0].next[0]
        if target is None or target.value != value:
            return False
        for level in range(self.highest_level + 1):
            if update[level].next[level] is not target:
                break
            update[level].next[level] = target.next[level]
        while self.highest_level > 0 and self.head.next[self.highest_level] is None:
            self.highest_level -= 1
        self._size -= 1
        return True

    def search(self, value: Any) -> bool:
        """Return True if ``value`` is stored."""
        candidate = self._predecessors(value)[0].next[0]
        return candidate is not None and candidate.value == value

    def levels(self) -> list[list[Any]]:
        """Return the values linked at each level, bottom level first."""
        result = []
        for level in range(self.highest_level + 1):
            row = []
            node = self.head.next[level]
            while node is not None:
                row.append(node.value)
                node = node.next[level]
            result.append(row)
        return result

    def show(self) -> str:
        """Return one line per level listing its values in order."""
        return "\n".join(
            f"Level {index}: " + " -> ".join(str(value) for value in row) + " ."
            for index, row in enumerate(self.levels())
        )