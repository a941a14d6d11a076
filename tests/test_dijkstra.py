import random

import pytest

from portalpath.dijkstra import (
    dijkstra_list,
    dijkstra_list_heap,
    dijkstra_matrix,
    dijkstra_matrix_heap,
)
from portalpath.graph import Graph

ALL = [dijkstra_list, dijkstra_matrix, dijkstra_list_heap, dijkstra_matrix_heap]


def build(points, edges=(), portals=()):
    graph = Graph(len(points))
    for index, (x, y) in enumerate(points):
        graph.add_vertex(index, x, y)
    for u, v in edges:
        graph.add_edge(u, v, graph.distance(u, v))
    for u, v in portals:
        graph.add_portal(u, v)
    return graph


@pytest.mark.parametrize("search", ALL)
def test_single_vertex_is_already_at_goal(search):
    graph = build([(0.0, 0.0)])
    assert search(graph, 0.0, 0) is True


@pytest.mark.parametrize("search", ALL)
def test_single_edge_energy_limit(search):
    graph = build([(0.0, 0.0), (3.0, 4.0)], edges=[(0, 1)])
    assert search(graph, 5.0, 0) is True
    assert search(graph, 4.9, 0) is False


@pytest.mark.parametrize("search", ALL)
def test_unreachable_goal(search):
    graph = build([(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)], edges=[(1, 2)])
    assert search(graph, 1000.0, 10) is False


@pytest.mark.parametrize("search", ALL)
def test_edges_are_directed(search):
    graph = build([(0.0, 0.0), (1.0, 0.0)], edges=[(1, 0)])
    assert search(graph, 1000.0, 0) is False


@pytest.mark.parametrize("search", ALL)
def test_portal_to_goal_costs_no_energy(search):
    graph = build([(0.0, 0.0), (100.0, 100.0)], portals=[(0, 1)])
    assert search(graph, 0.0, 1) is True


@pytest.mark.parametrize("search", ALL)
def test_portal_to_goal_counts_against_limit(search):
    graph = build([(0.0, 0.0), (100.0, 100.0)], portals=[(0, 1)])
    assert search(graph, 0.0, 0) is False


@pytest.mark.parametrize("search", ALL)
def test_intermediate_portal_needs_allowance(search):
    graph = build(
        [(0.0, 0.0), (50.0, 0.0), (53.0, 4.0)],
        edges=[(1, 2)],
        portals=[(0, 1)],
    )
    assert search(graph, 5.0, 0) is False
    assert search(graph, 5.0, 1) is True
    assert search(graph, 4.0, 1) is False


@pytest.mark.parametrize("search", ALL)
def test_shorter_of_two_routes_is_found(search):
    points = [(0.0, 0.0), (0.0, 10.0), (3.0, 0.0), (3.0, 4.0)]
    graph = build(points, edges=[(0, 1), (1, 3), (0, 2), (2, 3)])
    assert search(graph, 7.0, 0) is True
    assert search(graph, 6.9, 0) is False


@pytest.mark.parametrize("search", ALL)
def test_portal_shortcut_preferred_over_edges(search):
    points = [(0.0, 0.0), (30.0, 40.0), (30.0, 41.0)]
    graph = build(points, edges=[(0, 1), (1, 2)], portals=[(0, 1)])
    assert search(graph, 1.0, 1) is True


@pytest.mark.parametrize("search", ALL)
def test_empty_graph_is_rejected(search):
    with pytest.raises(ValueError):
        search(Graph(0), 10.0, 1)


def _random_graph(rng, size, edge_count):
    points = [(rng.uniform(0, 100), rng.uniform(0, 100)) for _ in range(size)]
    pairs = set()
    while len(pairs) < edge_count:
        u, v = rng.randrange(size), rng.randrange(size)
        if u != v:
            pairs.add((u, v))
    return build(points, edges=sorted(pairs))


@pytest.mark.parametrize("seed", range(20))
def test_list_and_matrix_agree_without_portals(seed):
    rng = random.Random(seed)
    graph = _random_graph(rng, 8, 16)
    for energy in (10.0, 50.0, 100.0, 200.0, 400.0):
        assert dijkstra_list(graph, energy, 0) == dijkstra_matrix(graph, energy, 0)


@pytest.mark.parametrize("seed", range(20))
def test_more_energy_never_hurts(seed):
    rng = random.Random(seed)
    graph = _random_graph(rng, 8, 16)
    results = [dijkstra_list(graph, energy, 0) for energy in (10.0, 50.0, 100.0, 200.0, 400.0)]
    assert results == sorted(results)


@pytest.mark.parametrize("search", ALL)
def test_search_leaves_graph_unchanged(search):
    graph = build([(0.0, 0.0), (3.0, 4.0), (6.0, 8.0)], edges=[(0, 1), (1, 2)], portals=[(0, 2)])
    before = [row[:] for row in graph.matrix]
    first = search(graph, 10.0, 1)
    assert graph.matrix == before
    assert search(graph, 10.0, 1) == first