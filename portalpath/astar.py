"""A* search for a path from the first vertex to the last within energy and portal limits."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Union

from .dijkstra import INFINITY, _list_moves, _matrix_moves
from .graph import Graph
from .queues import BinaryHeap, SortedQueue

_Queue = Union[SortedQueue, BinaryHeap]
_Move = tuple[int, float, bool]


def _list_portal_allowed(
    cost: float, target_distance: float, portals_used: int, max_portals: int, at_goal: bool
) -> bool:
    """Portal rule for list searches: respect the portal limit except into the goal."""
    within_limit = portals_used + 1 <= max_portals or at_goal
    return within_limit and cost < target_distance


def _matrix_portal_allowed(
    cost: float, target_distance: float, portals_used: int, max_portals: int, at_goal: bool
) -> bool:
    """Portal rule for matrix searches: take any improving portal, and always one into the goal."""
    return cost < target_distance or at_goal


def _search(
    graph: Graph,
    max_energy: float,
    max_portals: int,
    queue: _Queue,
    moves: Callable[[Graph, int], Iterator[_Move]],
    portal_allowed: Callable[[float, float, int, int, bool], bool],
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
        # The queued cost includes the heuristic; the real cost is the best known distance.
        cost = distances[current]
        portals_used = entry.portals_used

        if current == goal:
            return cost <= max_energy and portals_used <= max_portals

        for target, weight, is_portal in moves(graph, current):
            if is_portal:
                if portal_allowed(
                    cost, distances[target], portals_used, max_portals, target == goal
                ):
                    distances[target] = cost
                    priority = cost + graph.distance(target, goal)
                    queue.push(target, priority, portals_used + 1)
            else:
                total = cost + weight
                if total < distances[target]:
                    distances[target] = total
                    priority = total + graph.distance(target, goal)
                    queue.push(target, priority, portals_used)

    return False


def astar_list(graph: Graph, max_energy: float, max_portals: int) -> bool:
    """Search the adjacency lists with a sorted queue."""
    return _search(
        graph, max_energy, max_portals, SortedQueue(), _list_moves, _list_portal_allowed
    )


def astar_matrix(graph: Graph, max_energy: float, max_portals: int) -> bool:
    """Search the adjacency matrix with a sorted queue."""
    return _search(
        graph, max_energy, max_portals, SortedQueue(), _matrix_moves, _matrix_portal_allowed
    )


def astar_list_heap(graph: Graph, max_energy: float, max_portals: int) -> bool:
    """Search the adjacency lists with a heap bounded by the vertex count."""
    return _search(
        graph,
        max_energy,
        max_portals,
        BinaryHeap(graph.size),
        _list_moves,
        _list_portal_allowed,
    )


def astar_matrix_heap(graph: Graph, max_energy: float, max_portals: int) -> bool:
    """Search the adjacency matrix with a heap bounded by the vertex count."""
    return _search(
        graph,
        max_energy,
        max_portals,
        BinaryHeap(graph.size),
        _matrix_moves,
        _matrix_portal_allowed,
    )