"""Dijkstra's search for a path from the first vertex to the last within energy and portal limits."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Union

from .graph import NO_EDGE, PORTAL, Graph
from .queues import BinaryHeap, SortedQueue

INFINITY = float(0x3F3F3F3F)
"""Distance given to vertices not reached yet."""

_Queue = Union[SortedQueue, BinaryHeap]
_Move = tuple[int, float, bool]


def _list_moves(graph: Graph, index: int) -> Iterator[_Move]:
    """Edges, then portals, leaving ``index``, read from the adjacency lists."""
    for edge in graph.edges_from(index):
        yield edge.target.index, edge.weight, False
    for portal in graph.portals_from(index):
        yield portal.target.index, PORTAL, True


def _matrix_moves(graph: Graph, index: int) -> Iterator[_Move]:
    """Connections leaving ``index`` in target order, read from the matrix."""
    for target, weight in enumerate(graph.matrix[index]):
        if target == index or weight == NO_EDGE:
            continue
        yield target, weight, weight == PORTAL


def _search(
    graph: Graph,
    max_energy: float,
    max_portals: int,
    queue: _Queue,
    moves: Callable[[Graph, int], Iterator[_Move]],
) -> bool:
    size = graph.size
    if size == 0:
        raise ValueError("graph has no vertices")
    goal = size - 1
    distances = [INFINITY] * size
    distances[0] = 0.0
    queue.push(0, 0.0, 0)

    while queue:
        entry = queue.pop()
        current = entry.vertex
        cost = entry.cost
        portals_used = entry.portals_used

        if current == goal:
            return cost <= max_energy and portals_used <= max_portals

        if distances[current] < cost:
            continue

        for target, weight, is_portal in moves(graph, current):
            if is_portal:
                if portals_used + 1 <= max_portals or target == goal:
                    if distances[current] < distances[target]:
                        distances[target] = distances[current]
                        queue.push(target, distances[target], portals_used + 1)
            else:
                total = cost + weight
                if total < distances[target]:
                    distances[target] = total
                    queue.push(target, total, portals_used)

    return False


def dijkstra_list(graph: Graph, max_energy: float, max_portals: int) -> bool:
    """Search the adjacency lists with a sorted queue."""
    return _search(graph, max_energy, max_portals, SortedQueue(), _list_moves)


def dijkstra_matrix(graph: Graph, max_energy: float, max_portals: int) -> bool:
    """Search the adjacency matrix with a sorted queue."""
    return _search(graph, max_energy, max_portals, SortedQueue(), _matrix_moves)


def dijkstra_list_heap(graph: Graph, max_energy: float, max_portals: int) -> bool:
    """Search the adjacency lists with a heap bounded by the vertex count."""
    return _search(graph, max_energy, max_portals, BinaryHeap(graph.size), _list_moves)


def dijkstra_matrix_heap(graph: Graph, max_energy: float, max_portals: int) -> bool:
    """Search the adjacency matrix with a heap bounded by the vertex count."""
    return _search(graph, max_energy, max_portals, BinaryHeap(graph.size), _matrix_moves)