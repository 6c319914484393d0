"""A self-balancing AVL search tree of distinct, ordered elements."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

_HORIZONTAL_HEADER = "==========tree/horizontal view==========\n"
_INDENT_STEP = 10


@dataclass(eq=False)
class AVLNode:
    """A tree node; a leaf has height 0."""

    element: Any
    height: int = 0
    left: AVLNode | None = None
    right: AVLNode | None = None


class AVLTree:
    """An AVL tree that rejects duplicate elements."""

    def __init__(self, elements: Iterable[Any] = ()) -> None:
        self.root: AVLNode | None = None
        self._size = 0
        for element in elements:
            self.insert(element)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, element: Any) -> bool:
        return self.search(element) is not None

    def __iter__(self) -> Iterator[Any]:
        yield from self._inorder(self.root)

    def _inorder(self, node: AVLNode | None) -> Iterator[Any]:
        if node is None:
            return
        yield from self._inorder(node.left)
        yield node.element
        yield from self._inorder(node.right)

    def inorder(self) -> list[Any]:
        """Return the elements in ascending order."""
        return list(self)

    # ------------------------------------------------------------------ lookup

    def search(self, element: Any) -> AVLNode | None:
        """Return the node holding ``element``, or None if it is absent."""
        return self._search(self.root, element)

    def _search(self, node: AVLNode | None, element: Any) -> AVLNode | None:
        if node is None:
            return None
        if node.element == element:
            return node
        if element < node.element:
            return self._search(node.left, element)
        return self._search(node.right, element)

    def path(self, element: Any) -> list[AVLNode]:
        """Return the nodes visited from the root while looking for ``element``."""
        nodes = []
        current = self.root
        while current is not None:
            nodes.append(current)
            if element < current.element:
                current = current.left
            elif element > current.element:
                current = current.right
            else:
                break
        return nodes

    # ---------------------------------------------------------------- mutation

    def _bst_insert(self, element: Any) -> bool:
        new_node = AVLNode(element)
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

    def insert(self, element: Any) -> bool:
        """Insert ``element``; return False if it was already present."""
        if not self._bst_insert(element):
            return False
        self._balance_path(element)
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
            else:
                if element < parent.element:
                    parent.left = replacement
                else:
                    parent.right = replacement
                self._balance_path(parent.element)
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
            self._balance_path(parent_of_rightmost.element)

        self._size -= 1
        return True

    # --------------------------------------------------------------- balancing

    def height(self, node: AVLNode | None) -> int:
        """Return the number of levels in the subtree at ``node`` (0 for None)."""
        if node is None:
            return 0
        return 1 + max(self.height(node.left), self.height(node.right))

    def balance_factor(self, node: AVLNode | None) -> int:
        """Return right subtree height minus left subtree height."""
        if node is None:
            return 0
        return self.height(node.right) - self.height(node.left)

    @staticmethod
    def _update_height(node: AVLNode) -> None:
        left = node.left.height if node.left is not None else -1
        right = node.right.height if node.right is not None else -1
        node.height = 1 + max(left, right)

    def _replace_child(
        self, parent: AVLNode | None, old: AVLNode, new: AVLNode
    ) -> None:
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _balance_path(self, element: Any) -> None:
        nodes = self.path(element)
        parents = [None, *nodes[:-1]]
        for node, parent in reversed(list(zip(nodes, parents))):
            self._update_height(node)
            factor = self.balance_factor(node)
            if factor == -2:
                if self.balance_factor(node.left) <= 0:
                    self._balance_ll(node, parent)
                else:
                    self._balance_lr(node, parent)
            elif factor == 2:
                if self.balance_factor(node.right) >= 0:
                    self._balance_rr(node, parent)
                else:
                    self._balance_rl(node, parent)

    def _balance_ll(self, a: AVLNode, parent: AVLNode | None) -> None:
        b = a.left
        self._replace_child(parent, a, b)
        a.left = b.right
        b.right = a
        self._update_height(a)
        self._update_height(b)

    def _balance_lr(self, a: AVLNode, parent: AVLNode | None) -> None:
        b = a.left
        c = b.right
        self._replace_child(parent, a, c)
        a.left = c.right
        b.right = c.left
        c.left = b
        c.right = a
        self._update_height(a)
        self._update_height(b)
        self._update_height(c)

    def _balance_rr(self, a: AVLNode, parent: AVLNode | None) -> None:
        b = a.right
        self._replace_child(parent, a, b)
        a.right = b.left
        b.left = a
        self._update_height(a)
        self._update_height(b)

    def _balance_rl(self, a: AVLNode, parent: AVLNode | None) -> None:
        b = a.right
        c = b.left
        self._replace_child(parent, a, c)
        a.right = c.left
        b.left = c.right
        c.left = a
        c.right = b
        self._update_height(a)
        self._update_height(b)
        self._update_height(c)

    def rotate_right(self, node: AVLNode | None) -> bool:
        """Rotate right in place at ``node``; the node object stays the subtree top.

        Return False, changing nothing, if ``node`` or its left child is missing.
        """
        if node is None or node.left is None:
            return False
        lower = node.left
        top_element, lower_element = node.element, lower.element
        outer, middle, far = lower.left, lower.right, node.right
        lower.element, lower.left, lower.right = top_element, middle, far
        node.element, node.left, node.right = lower_element, outer, lower
        self._update_height(lower)
        self._update_height(node)
        return True

    def rotate_left(self, node: AVLNode | None) -> bool:
        """Rotate left in place at ``node``; the node object stays the subtree top.

        Return False, changing nothing, if ``node`` or its right child is missing.
        """
        if node is None or node.right is None:
            return False
        lower = node.right
        top_element, lower_element = node.element, lower.element
        far, middle, outer = node.left, lower.left, lower.right
        lower.element, lower.left, lower.right = top_element, far, middle
        node.element, node.left, node.right = lower_element, lower, outer
        self._update_height(lower)
        self._update_height(node)
        return True

    # ------------------------------------------------------------------ queries

    def level_order_nodes(self, node: AVLNode | None) -> list[AVLNode]:
        """Return the nodes of the subtree at ``node`` in breadth-first order."""
        if node is None:
            return []
        ordered = []
        pending = deque([node])
        while pending:
            current = pending.popleft()
            ordered.append(current)
            pending.extend(
                child for child in (current.left, current.right) if child is not None
            )
        return ordered

    def levels(self) -> list[list[Any]]:
        """Return the elements grouped by depth, top level first."""
        result = []
        current = [self.root] if self.root is not None else []
        while current:
            result.append([node.element for node in current])
            current = [
                child
                for node in current
                for child in (node.left, node.right)
                if child is not None
            ]
        return result

    def count_nodes_at_level(self, level: int) -> int:
        """Return the number of nodes at depth ``level`` (root is depth 0)."""
        return self._count_at_level(self.root, level)

    def _count_at_level(self, node: AVLNode | None, level: int) -> int:
        if node is None:
            return 0
        if level == 0:
            return 1
        return self._count_at_level(node.left, level - 1) + self._count_at_level(
            node.right, level - 1
        )

    def count_in_range(self, low: Any, high: Any) -> int:
        """Return how many elements lie in ``[low, high]``."""
        return self._count_in_range(self.root, low, high)

    def _count_in_range(self, node: AVLNode | None, low: Any, high: Any) -> int:
        if node is None:
            return 0
        count = 1 if low <= node.element <= high else 0
        if node.element > low:
            count += self._count_in_range(node.left, low, high)
        if node.element < high:
            count += self._count_in_range(node.right, low, high)
        return count

    def diameter(self) -> int:
        """Return the number of edges on the longest path between two nodes."""
        best = 0

        def walk(node: AVLNode | None) -> int:
            nonlocal best
            if node is None:
                return 0
            left = walk(node.left)
            right = walk(node.right)
            best = max(best, left + right)
            return 1 + max(left, right)

        walk(self.root)
        return best

    # ---------------------------------------------------------------- rendering

    def level_order_display(self) -> str:
        """Return one line per depth, each prefixed with its level index."""
        if self.root is None:
            return "Tree is empty."
        return "\n".join(
            f"Current level: {index}: " + "".join(f"{element} " for element in row)
            for index, row in enumerate(self.levels())
        )

    def display_horizontally(self) -> str:
        """Return the tree drawn sideways: right subtree above, left below."""
        parts = [_HORIZONTAL_HEADER]
        self._draw(self.root, 0, parts)
        return "".join(parts)

    def _draw(self, node: AVLNode | None, space: int, parts: list[str]) -> None:
        if node is None:
            return
        space += _INDENT_STEP
        self._draw(node.right, space, parts)
        parts.append("\n" + " " * (space - _INDENT_STEP) + f"{node.element}\n")
        self._draw(node.left, space, parts)