"""An unbalanced binary search tree of distinct, ordered elements."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

_INDENT_STEP = 10
_ROOT: Any = object()


@dataclass(eq=False)
class TreeNode:
    """A tree node holding one element and links to its two children."""

    element: Any = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


class BST:
    """A binary search tree that rejects duplicate elements."""

    def __init__(self, elements: Iterable[Any] = ()) -> None:
        self.root: TreeNode | None = None
        self._size = 0
        for element in elements:
            self.insert(element)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, element: Any) -> bool:
        return self.search(element) is not None

    def __iter__(self) -> Iterator[Any]:
        yield from self._inorder(self.root)

    def _inorder(self, node: TreeNode | None) -> Iterator[Any]:
        if node is None:
            return
        yield from self._inorder(node.left)
        yield node.element
        yield from self._inorder(node.right)

    def inorder(self) -> list[Any]:
        """Return the elements in ascending order."""
        return list(self)

    def copy(self) -> BST:
        """Return a deep copy of this tree."""
        duplicate = BST()
        duplicate.root = self._copy_subtree(self.root)
        duplicate._size = self._size
        return duplicate

    def _copy_subtree(self, node: TreeNode | None) -> TreeNode | None:
        if node is None:
            return None
        return TreeNode(
            node.element, self._copy_subtree(node.left), self._copy_subtree(node.right)
        )

    def clear(self) -> None:
        """Remove every element."""
        self.root = None
        self._size = 0

    # ------------------------------------------------------------------ lookup

    def search(self, element: Any) -> TreeNode | None:
        """Return the node holding ``element``, or None if it is absent."""
        current = self.root
        while current is not None:
            if current.element == element:
                return current
            current = current.left if element < current.element else current.right
        return None

    def path(self, element: Any) -> list[TreeNode]:
        """Return the nodes from the root down to the node holding ``element``.

        Raise KeyError if ``element`` is not in the tree.
        """
        nodes = []
        current = self.root
        while current is not None:
            nodes.append(current)
            if current.element == element:
                return nodes
            current = current.left if element < current.element else current.right
        raise KeyError(element)

    # ---------------------------------------------------------------- mutation

    def insert(self, element: Any) -> bool:
        """Insert ``element``; return False if it was already present."""
        new_node = TreeNode(element)
        if self.root is None:
            self.root = new_node
        else:
            parent = None
            current = self.root
            while current is not None:
                parent = current
                if element < current.element:
                    current = current.left
                elif element > current.element:
                    current = current.right
                else:
                    return False
            if element < parent.element:
                parent.left = new_node
            else:
                parent.right = new_node
        self._size += 1
        return True

    def remove(self, element: Any) -> bool:
        """Remove ``element``; return False if it was not present."""
        parent = None
        current = self.root
        while current is not None and current.element != element:
            parent = current
            current = current.left if element < current.element else current.right
        if current is None:
            return False

        if current.left is None:
            replacement = current.right
            if parent is None:
                self.root = replacement
            elif element < parent.element:
                parent.left = replacement
            else:
                parent.right = replacement
        else:
            parent_of_rightmost = current
            rightmost = current.left
            while rightmost.right is not None:
                parent_of_rightmost = rightmost
                rightmost = rightmost.right
            current.element = rightmost.element
            if parent_of_rightmost.right is rightmost:
                parent_of_rightmost.right = rightmost.left
            else:
                parent_of_rightmost.left = rightmost.left

        self._size -= 1
        return True

    # ------------------------------------------------------------------ queries

    def height(self, node: TreeNode | None) -> int:
        """Return the edge count of the longest downward path from ``node``.

        A leaf has height 0 and a missing node height -1.
        """
        if node is None:
            return -1
        return 1 + max(self.height(node.left), self.height(node.right))

    def max(self) -> Any:
        """Return the largest element; raise ValueError if the tree is empty."""
        if self.root is None:
            raise ValueError("the tree is empty, no maximum")
        current = self.root
        while current.right is not None:
            current = current.right
        return current.element

    def min(self) -> Any:
        """Return the smallest element; raise ValueError if the tree is empty."""
        if self.root is None:
            raise ValueError("the tree is empty, no minimum")
        current = self.root
        while current.left is not None:
            current = current.left
        return current.element

    def is_bst(self) -> bool:
        """Return True if every node respects the search-tree ordering."""
        return self._is_bst(self.root, None, None)

    def _is_bst(self, node: TreeNode | None, low: Any, high: Any) -> bool:
        if node is None:
            return True
        if low is not None and node.element < low:
            return False
        if high is not None and node.element > high:
            return False
        return self._is_bst(node.left, low, node.element) and self._is_bst(
            node.right, node.element, high
        )

    def level_order(self, node: TreeNode | None = _ROOT) -> list[Any]:
        """Return the elements of the subtree at ``node`` breadth first.

        With no argument the whole tree is walked.
        """
        start = self.root if node is _ROOT else node
        if start is None:
            return []
        ordered = []
        pending = deque([start])
        while pending:
            current = pending.popleft()
            ordered.append(current.element)
            pending.extend(
                child for child in (current.left, current.right) if child is not None
            )
        return ordered

    def nodes_at_distance(self, k: int) -> list[TreeNode]:
        """Return the nodes exactly ``k`` edges below the root, left to right."""
        if k < 0:
            return []
        current = [self.root] if self.root is not None else []
        for _ in range(k):
            current = [
                child
                for node in current
                for child in (node.left, node.right)
                if child is not None
            ]
        return current

    def closest_common_ancestor(self, element1: Any, element2: Any) -> TreeNode | None:
        """Return the lowest node whose subtree spans both elements, or None."""
        node = self.root
        while node is not None:
            if element1 < node.element and element2 < node.element:
                node = node.left
            elif element1 > node.element and element2 > node.element:
                node = node.right
            else:
                return node
        return None

    # ---------------------------------------------------------------- rendering

    def display_horizontally(self) -> str:
        """Return the tree drawn sideways: right subtree above, left below."""
        parts: list[str] = []
        self._draw(self.root, 0, parts)
        return "".join(parts)

    def _draw(self, node: TreeNode | None, space: int, parts: list[str]) -> None:
        if node is None:
            return
        space += _INDENT_STEP
        self._draw(node.right, space, parts)
        parts.append("\n" + " " * (space - _INDENT_STEP) + f"{node.element}\n")
        self._draw(node.left, space, parts)