"""A singly linked circular list that keeps a pointer to its last node."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator


@dataclass(eq=False)
class _Node:
    data: Any
    next: _Node | None = None


class CircularLinkedList:
    """A circular list; the last node links back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._last: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[_Node]:
        if self._last is None:
            return
        current = self._last.next
        while True:
            yield current
            if current is self._last:
                return
            current = current.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __contains__(self, value: Any) -> bool:
        return any(data == value for data in self)

    def _node_at(self, position: int) -> _Node:
        if self._last is None:
            raise IndexError("list is empty")
        if not 0 <= position < self._size:
            raise IndexError(f"position {position} out of bounds")
        for index, node in enumerate(self._nodes()):
            if index == position:
                return node
        raise IndexError(f"position {position} out of bounds")

    def __getitem__(self, position: int) -> Any:
        return self._node_at(position).data

    def __setitem__(self, position: int, value: Any) -> None:
        self._node_at(position).data = value

    def append(self, value: Any) -> None:
        """Add ``value`` after the last node."""
        node = _Node(value)
        if self._last is None:
            node.next = node
        else:
            node.next = self._last.next
            self._last.next = node
        self._last = node
        self._size += 1

    def remove(self, value: Any) -> bool:
        """Remove the first node holding ``value``; return False if none does."""
        if self._last is None:
            return False
        previous = self._last
        for node in self._nodes():
            if node.data == value:
                if node is previous:
                    self._last = None
                else:
                    previous.next = node.next
                    if node is self._last:
                        self._last = previous
                self._size -= 1
                return True
            previous = node
        return False

    def copy(self) -> CircularLinkedList:
        """Return an independent list with the same values."""
        return CircularLinkedList(self)

    def display(self) -> str:
        """Return the values, each followed by a space."""
        return "".join(f"{value} " for value in self)