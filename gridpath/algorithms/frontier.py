"""
Priority frontier with stable tie-breaking.
"""

from __future__ import annotations

import heapq
from typing import Generic, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """
    Binary min-heap of (priority, item).

    Equal priorities pop in insertion order unless the caller supplies
    its own sequence number. Items are never compared, so they need not
    be orderable.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, T]] = []
        self._counter = 0  # tie-breaker for stability

    def push(self, item: T, priority: float, seq: int | None = None) -> None:
        """
        Add an item.

        Args:
            item: Value to store
            priority: Lower pops first
            seq: Tie-breaker among equal priorities (default: insertion order).
                Must be unique per priority.
        """
        if seq is None:
            seq = self._counter
            self._counter += 1
        heapq.heappush(self._heap, (priority, seq, item))

    def pop(self) -> tuple[float, T]:
        """Remove and return the lowest (priority, item)."""
        priority, _, item = heapq.heappop(self._heap)
        return priority, item

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
