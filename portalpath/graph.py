"""Directed graph of points in the plane, with weighted edges and free portals."""

from __future__ import annotations

import math
from dataclasses import dataclass

NO_EDGE = -1.0
"""Matrix value for a pair of vertices with no connection."""

PORTAL = 0.0
"""Matrix value for a portal, a connection that costs no energy."""


@dataclass(frozen=True)
class Vertex:
    """A point of the graph, identified by its index."""

    index: int
    x: float
    y: float


@dataclass(frozen=True)
class Edge:
    """A directed connection to ``target`` costing ``weight``."""

    target: Vertex
    weight: float


class Graph:
    """A graph held both as an adjacency matrix and as adjacency lists.

    Matrix cells are ``NO_EDGE`` where nothing connects two vertices,
    ``PORTAL`` for a portal, and the edge weight otherwise.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"graph size must not be negative, got {size}")
        self.size = size
        self.matrix: list[list[float]] = [[NO_EDGE] * size for _ in range(size)]
        self.vertices: list[Vertex | None] = [None] * size
        self._edges: list[list[Edge]] = [[] for _ in range(size)]
        self._portals: list[list[Edge]] = [[] for _ in range(size)]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"vertex index {index} out of range 0..{self.size - 1}")

    def _vertex(self, index: int) -> Vertex:
        self._check_index(index)
        vertex = self.vertices[index]
        if vertex is None:
            raise ValueError(f"vertex {index} has not been added")
        return vertex

    def add_vertex(self, index: int, x: float, y: float) -> Vertex:
        """Place vertex ``index`` at ``(x, y)`` and return it."""
        self._check_index(index)
        vertex = Vertex(index, x, y)
        self.vertices[index] = vertex
        return vertex

    def add_edge(self, u: int, v: int, weight: float) -> None:
        """Add a directed edge from ``u`` to ``v``."""
        self._vertex(u)
        target = self._vertex(v)
        self.matrix[u][v] = weight
        self._edges[u].append(Edge(target, weight))

    def add_portal(self, u: int, v: int) -> None:
        """Add a directed portal from ``u`` to ``v``."""
        self._vertex(u)
        target = self._vertex(v)
        self.matrix[u][v] = PORTAL
        self._portals[u].append(Edge(target, PORTAL))

    def distance(self, a: int, b: int) -> float:
        """Euclidean distance between vertices ``a`` and ``b``."""
        first = self._vertex(a)
        second = self._vertex(b)
        return math.hypot(first.x - second.x, first.y - second.y)

    def edges_from(self, index: int) -> list[Edge]:
        """Edges leaving ``index``, most recently added first."""
        self._check_index(index)
        return self._edges[index][::-1]

    def portals_from(self, index: int) -> list[Edge]:
        """Portals leaving ``index``, most recently added first."""
        self._check_index(index)
        return self._portals[index][::-1]