"""
Depth-first search.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from gridpath.algorithms.base import NeighborFn, SearchAlgorithm

if TYPE_CHECKING:
    from gridpath.grid.cell import Cell
    from gridpath.grid.model import Grid


class DepthFirst(SearchAlgorithm):
    """
    LIFO expansion. No shortest-path guarantee.

    Same discovery marking as BFS, but the most recently discovered
    neighbor (the last in E, S, W, N order) is expanded next.
    """

    display_name = "Depth-First Search"
    time_complexity = "O(V+E)"
    space_complexity = "O(V)"

    @property
    def name(self) -> str:
        return "dfs"

    @property
    def description(self) -> str:
        return "Explores as far as possible first, not optimal for shortest path"

    def _search(
        self,
        start: Cell,
        goal: Cell,
        neighbors: NeighborFn,
        grid: Grid,
    ) -> Iterator[Cell]:
        start.cost_from_start = 0
        stack = [start]

        while stack:
            current = stack.pop()
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
                stack.append(neighbor)
