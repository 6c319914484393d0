"""An undirected graph built from an adjacency matrix, with simple analyses."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Edge:
    """An undirected edge between two zero-indexed vertices."""

    u: int = -1
    v: int = -1


def random_friendship_matrix(
    n: int, rng: random.Random | None = None
) -> list[list[bool]]:
    """Return a random symmetric ``n`` x ``n`` matrix with a false diagonal."""
    rng = rng if rng is not None else random.Random()
    matrix = [[False] * n for _ in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            matrix[i][j] = matrix[j][i] = bool(rng.randrange(2))
    return matrix


class Graph:
    """A graph holding its vertices, adjacency list and edge list."""

    def __init__(self, adjacency_matrix: Sequence[Sequence[bool]] = ()) -> None:
        size = len(adjacency_matrix)
        if any(len(row) != size for row in adjacency_matrix):
            raise ValueError("adjacency matrix must be square")
        self.vertices: list[int] = list(range(size))
        self.adjacency_list: list[list[int]] = [
            [j for j, connected in enumerate(row) if connected]
            for row in adjacency_matrix
        ]
        self.edge_list: list[Edge] = [
            Edge(u, v)
            for u, neighbours in enumerate(self.adjacency_list)
            for v in neighbours
            if u < v
        ]

    def _check(self, *vertices: int) -> None:
        for vertex in vertices:
            if not 0 <= vertex < len(self.adjacency_list):
                raise IndexError(f"vertex {vertex} out of range")

    # ------------------------------------------------------------------ queries

    def vertex_count(self) -> int:
        """Return the number of vertices."""
        return len(self.vertices)

    def edge_count(self) -> int:
        """Return the number of edges."""
        return len(self.edge_list)

    def neighbors(self, v: int) -> list[int]:
        """Return the neighbours of ``v``; raise IndexError for a bad vertex."""
        self._check(v)
        return list(self.adjacency_list[v])

    def degree(self, v: int) -> int:
        """Return the number of neighbours of ``v``."""
        self._check(v)
        return len(self.adjacency_list[v])

    def degrees(self) -> list[tuple[int, int]]:
        """Return ``(vertex, degree)`` pairs, highest degree first.

        Ties are ordered by descending vertex index.
        """
        ranked = sorted(
            ((self.degree(v), v) for v in self.vertices), reverse=True
        )
        return [(vertex, degree) for degree, vertex in ranked]

    def has_edge(self, v1: int, v2: int) -> bool:
        """Return True if ``v1`` and ``v2`` are adjacent."""
        self._check(v1, v2)
        return v2 in self.adjacency_list[v1]

    def path(self, v1: int, v2: int) -> list[int]:
        """Return a depth-first path from ``v1`` to ``v2``, or [] if none exists.

        Raise IndexError for a bad vertex and ValueError if both are the same.
        """
        self._check(v1, v2)
        if v1 == v2:
            raise ValueError("start and end vertices must differ")
        visited = [False] * len(self.vertices)
        trail: list[int] = []

        def dfs(current: int) -> bool:
            visited[current] = True
            trail.append(current)
            if current == v2:
                return True
            for neighbour in self.adjacency_list[current]:
                if not visited[neighbour] and dfs(neighbour):
                    return True
            trail.pop()
            return False

        return trail if dfs(v1) else []

    def has_cycle(self) -> bool:
        """Return True if some walk along edges returns to its starting vertex."""
        visited = [False] * len(self.adjacency_list)

        def visit(current: int, parent: int) -> bool:
            visited[current] = True
            for neighbour in self.adjacency_list[current]:
                if not visited[neighbour]:
                    if visit(neighbour, current):
                        return True
                elif neighbour != parent:
                    return True
            return False

        return any(
            not visited[v] and visit(v, -1) for v in range(len(self.adjacency_list))
        )

    # ---------------------------------------------------------------- rendering

    def format_vertices(self) -> str:
        """Return the vertex listing."""
        return "Vertices: " + "".join(f"{v}, " for v in self.vertices)

    def format_adjacency_list(self) -> str:
        """Return one line per vertex listing its neighbours."""
        lines = ["Adjacency List:"]
        lines.extend(
            f"{v}: " + "".join(f"{n} " for n in neighbours)
            for v, neighbours in enumerate(self.adjacency_list)
        )
        return "\n".join(lines)

    def format_edge_list(self) -> str:
        """Return one line per edge."""
        lines = ["Edge List:"]
        lines.extend(f"({edge.u}, {edge.v})" for edge in self.edge_list)
        return "\n".join(lines)

    def format_degrees(self) -> str:
        """Return the degrees of all vertices, highest first."""
        lines = ["Degrees of vertices:"]
        lines.extend(
            f"Vertex: {vertex} Degree: {degree}" for vertex, degree in self.degrees()
        )
        return "\n".join(lines)

    def format_path(self, v1: int, v2: int, path: Sequence[int]) -> str:
        """Describe ``path`` as a route from ``v1`` to ``v2``."""
        self._check(v1, v2)
        if not path:
            return f"No path from {v1} to {v2}"
        return f"Path from {v1} to {v2}: " + "".join(f"{v}, " for v in path)