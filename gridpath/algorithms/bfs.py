"""
Breadth-first search.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import TYPE_CHECKING

from gridpath.algorithms.base import NeighborFn, SearchAlgorithm

if TYPE_CHECKING:
    from gridpath.grid.cell import Cell
    from gridpath.grid.model import Grid


class BreadthFirst(SearchAlgorithm):
    """
    FIFO expansion; shortest path on an unweighted grid.

    Cells are marked visited when discovered so each one is enqueued at
    most once. The start is marked when it is expanded.
    """

    display_name = "Breadth-First Search"
    time_complexity = "O(V+E)"
    space_complexity = "O(V)"
    optimal = True

    @property
    def name(self) -> str:
        return "bfs"

    @property
    def description(self) -> str:
        return "Explores all neighbors first, finds shortest path in unweighted graph"

    def _search(
        self,
        start: Cell,
        goal: Cell,
        neighbors: NeighborFn,
        grid: Grid,
    ) -> Iterator[Cell]:
        start.cost_from_start = 0
        queue = deque([start])

        while queue:
            current = queue.popleft()
            if current is goal:
                break

            current.visited = True
            yield current

            for neighbor in neighbors(current):
                if neighbor.visited or neighbor.is_wall:
                    continue
                neighbor.visited = True
                neighbor.predecessor = current
                neighbor.cost_from_start = current.cost_from_start + 1
                queue.append(neighbor)
