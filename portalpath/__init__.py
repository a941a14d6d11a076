"""Reachability under energy and portal budgets, by Dijkstra and A* search."""

__version__ = "0.1.0"