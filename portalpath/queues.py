"""Priority queues of search states: a sorted list and a bounded binary heap."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Any


@dataclass
class QueueEntry:
    """A search state: a vertex, its priority and the portals used to reach it."""

    vertex: Any
    cost: float
    portals_used: int


class SortedQueue:
    """Unbounded priority queue kept in cost order; equal costs leave in arrival order."""

    def __init__(self) -> None:
        self._costs: list[float] = []
        self._entries: list[QueueEntry] = []

    def push(self, vertex: Any, cost: float, portals_used: int) -> None:
        """Insert a state after every queued state of equal or lower cost."""
        position = bisect_right(self._costs, cost)
        self._costs.insert(position, cost)
        self._entries.insert(position, QueueEntry(vertex, cost, portals_used))

    def pop(self) -> QueueEntry:
        """Remove and return the state with the lowest cost."""
        if not self._entries:
            raise IndexError("pop from an empty queue")
        del self._costs[0]
        return self._entries.pop(0)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)


class BinaryHeap:
    """Min-heap on cost holding at most ``capacity`` states.

    A push onto a full heap is dropped and reported by returning ``False``.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._items: list[QueueEntry] = []

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if items[parent].cost > items[index].cost:
                items[parent], items[index] = items[index], items[parent]
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index
            if left < size and items[left].cost < items[smallest].cost:
                smallest = left
            if right < size and items[right].cost < items[smallest].cost:
                smallest = right
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest

    def push(self, vertex: Any, cost: float, portals_used: int) -> bool:
        """Insert a state; return ``False`` if the heap was full and it was dropped."""
        if len(self._items) >= self.capacity:
            return False
        self._items.append(QueueEntry(vertex, cost, portals_used))
        self._sift_up(len(self._items) - 1)
        return True

    def pop(self) -> QueueEntry:
        """Remove and return the state with the lowest cost."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return top

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)