"""Command line: read a portal graph and report whether the goal is reachable."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass

from .astar import astar_list_heap, astar_matrix_heap
from .dijkstra import dijkstra_list_heap, dijkstra_matrix_heap
from .graph import Graph


@dataclass
class Problem:
    """A graph together with the energy and portal limits of the trip."""

    graph: Graph
    max_energy: float
    max_portals: int


class _Tokens:
    def __init__(self, text: str) -> None:
        self._iter: Iterator[str] = iter(text.split())

    def _next(self) -> str:
        try:
            return next(self._iter)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        token = self._next()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def real(self) -> float:
        token = self._next()
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"expected a number, got {token!r}") from None

    def count(self, what: str) -> int:
        value = self.integer()
        if value < 0:
            raise ValueError(f"{what} must not be negative, got {value}")
        return value


def read_problem(text: str) -> Problem:
    """Parse vertex, edge and portal counts, then the items, then the two limits.

    Edge weights are the Euclidean distances between their endpoints.
    """
    tokens = _Tokens(text)
    vertex_count = tokens.count("vertex count")
    edge_count = tokens.count("edge count")
    portal_count = tokens.count("portal count")
    graph = Graph(vertex_count)

    for index in range(vertex_count):
        x = tokens.real()
        y = tokens.real()
        graph.add_vertex(index, x, y)

    for _ in range(edge_count):
        u = tokens.integer()
        v = tokens.integer()
        graph.add_edge(u, v, graph.distance(u, v))

    for _ in range(portal_count):
        u = tokens.integer()
        v = tokens.integer()
        graph.add_portal(u, v)

    max_energy = tokens.real()
    max_portals = tokens.integer()
    return Problem(graph, max_energy, max_portals)


def solve(problem: Problem) -> tuple[bool, bool, bool, bool]:
    """Run the matrix and list searches, Dijkstra then A* for each."""
    args = (problem.graph, problem.max_energy, problem.max_portals)
    return (
        dijkstra_matrix_heap(*args),
        astar_matrix_heap(*args),
        dijkstra_list_heap(*args),
        astar_list_heap(*args),
    )


def _format(results: tuple[bool, bool, bool, bool]) -> str:
    flags = [str(int(result)) for result in results]
    return f"{flags[0]} {flags[1]}\n{flags[2]} {flags[3]}\n"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="portalpath",
        description="Check whether the last vertex can be reached within energy and portal limits.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="problem file to read (default: standard input)",
    )
    args = parser.parse_args(argv)

    if args.input == "-":
        text = sys.stdin.read()
    else:
        try:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as error:
            parser.error(f"cannot read {args.input}: {error}")

    try:
        problem = read_problem(text)
        results = solve(problem)
    except (ValueError, IndexError) as error:
        parser.error(str(error))

    sys.stdout.write(_format(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())