"""A bounded max-priority queue of integer keys."""

from __future__ import annotations

import heapq

DEFAULT_CAPACITY = 50


class HeapFullError(OverflowError):
    """Raised when pushing onto a queue that is at capacity."""


class MaxHeap:
    """Binary max-heap holding at most ``capacity`` integer keys."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity cannot be negative")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, key: int) -> None:
        """Insert ``key``; raise HeapFullError when the queue is full."""
        if len(self._items) >= self.capacity:
            raise HeapFullError(f"queue is full ({self.capacity} keys)")
        heapq.heappush(self._items, -key)

    def peek_max(self) -> int:
        """Return the largest key without removing it."""
        if not self._items:
            raise IndexError("peek from an empty queue")
        return -self._items[0]

    def pop_max(self) -> int:
        """Remove and return the largest key."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return -heapq.heappop(self._items)

    def __len__(self) -> int:
        return len(self._items)