# portalpath

`portalpath` answers one question about a map of points in the plane: can a
traveller get from the first point to the last one without spending more than
a given amount of energy and without using more than a given number of
portals?

Points are joined by one-way edges, each with a weight, and by one-way
portals, which cost no energy but count against the portal budget. The answer
is found with Dijkstra's algorithm and with A* search (using the straight-line
distance to the last point as the estimate). Each can run over the adjacency
lists or the adjacency matrix of the graph, with a sorted queue or with a
binary heap.

## Installation

```
pip install .
```

## Command line

The `portalpath` command reads a problem from a file, or from standard input
when no file (or `-`) is given:

```
portalpath problem.txt
portalpath < problem.txt
```

Input format, whitespace separated:

```
n m k
x0 y0
...            (n pairs of coordinates)
u v            (m edges from u to v)
u v            (k portals from u to v)
energy portals
```

Vertices are numbered from 0 in the order their coordinates are given. The
weight of each edge is the Euclidean distance between its ends. The search
starts at vertex 0 and the target is vertex `n - 1`.

The command prints two lines, each made of two digits (`1` for reachable, `0`
for not): Dijkstra and A* over the adjacency matrix on the first line, and
Dijkstra and A* over the adjacency lists on the second. All four use the
binary heap. Malformed input (a missing or non-numeric token, a negative count,
a vertex index out of range) is reported as a usage error with exit status 2.

Example:

```
3 2 0
0 0
3 4
6 8
0 1
1 2
10 0
```

gives

```
1 1
1 1
```

## Library

```python
from portalpath.graph import Graph
from portalpath.dijkstra import dijkstra_list_heap
from portalpath.astar import astar_list_heap

graph = Graph(3)
graph.add_vertex(0, 0.0, 0.0)
graph.add_vertex(1, 3.0, 4.0)
graph.add_vertex(2, 6.0, 8.0)
graph.add_edge(0, 1, graph.distance(0, 1))   # weight 5.0
graph.add_portal(1, 2)

dijkstra_list_heap(graph, 5.0, 1)   # True
dijkstra_list_heap(graph, 4.9, 1)   # False: not enough energy
astar_list_heap(graph, 5.0, 0)      # False: the portal into the target is taken, then counted
```

Modules:

- `portalpath.graph` – `Vertex`, `Edge` and `Graph`. A `Graph(size)` holds
  its connections both as a matrix (`-1` for none, `0` for a portal, the
  weight otherwise) and as lists; `add_vertex`, `add_edge`, `add_portal`,
  `distance`, `edges_from` and `portals_from` (both newest first). Bad
  indices raise `IndexError`; using a vertex that was never added raises
  `ValueError`.
- `portalpath.queues` – `SortedQueue`, unbounded, where equal costs leave in
  arrival order; and `BinaryHeap(capacity)`, a min-heap whose `push` returns
  `False` and drops the state when full. Both hold `QueueEntry` items and
  raise `IndexError` when popped empty.
- `portalpath.dijkstra` – `dijkstra_list`, `dijkstra_matrix`,
  `dijkstra_list_heap`, `dijkstra_matrix_heap`.
- `portalpath.astar` – `astar_list`, `astar_matrix`, `astar_list_heap`,
  `astar_matrix_heap`.
- `portalpath.cli` – `read_problem(text)` parses the input format into a
  `Problem` (graph, `max_energy`, `max_portals`), `solve(problem)` returns the
  four results the command prints, and `main(argv=None)` is the command.

Every search function takes `(graph, max_energy, max_portals)` and returns a
`bool`. A graph with no vertices raises `ValueError`.

Things to know about the searches:

- A portal leading straight into the target may be taken even when the portal
  budget is spent, but the final answer still checks the portals used, so such
  a path is reported as not reachable.
- The A* matrix variants take any portal that improves a distance, without
  checking the portal budget on the way; the budget is only checked on
  arrival at the target.
- The heap variants bound the heap by the number of vertices. States pushed
  onto a full heap are dropped, so on busy graphs they can report `False`
  where the sorted-queue variants find a path.

## What it does not do

The package only answers yes or no. It does not return the path, the energy
spent or the number of portals used, and it always searches from vertex 0 to
the last vertex.

## Tests

```
pip install .[test]
pytest
```