"""Priority queues returning the smallest element first.

Elements only need to support ``<``.
"""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from itertools import pairwise
from typing import Generic, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """A binary min-heap."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._heap: list[T] = list(items)
        heapq.heapify(self._heap)

    def make_empty(self) -> None:
        """Remove every element."""
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def find_min(self) -> T:
        """Return the smallest element without removing it."""
        if not self._heap:
            raise IndexError("find_min on an empty priority queue")
        return self._heap[0]

    def delete_min(self) -> T:
        """Remove and return the smallest element."""
        if not self._heap:
            raise IndexError("delete_min on an empty priority queue")
        return heapq.heappop(self._heap)

    def insert(self, x: T) -> None:
        """Add ``x`` to the queue."""
        heapq.heappush(self._heap, x)

    def is_min_heap(self) -> bool:
        """Check that no element is smaller than its parent."""
        heap = self._heap
        return not any(heap[i] < heap[(i - 1) // 2] for i in range(1, len(heap)))


class SortedPriorityQueue(Generic[T]):
    """A priority queue kept as a decreasingly sorted list, minimum at the end."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)
        self._items.sort(reverse=True)

    def make_empty(self) -> None:
        """Remove every element."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def find_min(self) -> T:
        """Return the smallest element without removing it."""
        if not self._items:
            raise IndexError("find_min on an empty priority queue")
        return self._items[-1]

    def delete_min(self) -> T:
        """Remove and return the smallest element."""
        if not self._items:
            raise IndexError("delete_min on an empty priority queue")
        return self._items.pop()

    def insert(self, x: T) -> None:
        """Add ``x`` to the queue."""
        self._items.append(x)
        self._items.sort(reverse=True)

    def is_min_heap(self) -> bool:
        """Check that the items are in decreasing order."""
        return not any(a < b for a, b in pairwise(self._items))