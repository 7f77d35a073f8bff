"""
Dijkstra's algorithm over a unit-weight grid.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from math import inf
from typing import TYPE_CHECKING

from gridpath.algorithms.base import NeighborFn, SearchAlgorithm
from gridpath.algorithms.frontier import PriorityQueue

if TYPE_CHECKING:
    from gridpath.grid.cell import Cell
    from gridpath.grid.model import Grid

logger = logging.getLogger(__name__)


def _row_major_index(grid: Grid, cell: Cell) -> int:
    return cell.row * grid.cols + cell.col


class Dijkstra(SearchAlgorithm):
    """
    Shortest-path search ordered by accumulated cost.

    Every cell enters the frontier up front with infinite cost (the start
    with 0). Walls are skipped when popped; outdated entries left behind
    by a cost decrease are skipped the same way. The run stops when the
    goal is popped or the cheapest remaining cell is unreachable.

    Cells of equal cost pop in row-major order: every entry for a cell,
    including re-pushes after a cost decrease, carries the cell's
    row-major index as its tie-breaker.
    """

    display_name = "Dijkstra's Algorithm"
    time_complexity = "O((V+E) log V)"
    space_complexity = "O(V)"
    optimal = True

    @property
    def name(self) -> str:
        return "dijkstra"

    @property
    def description(self) -> str:
        return "Finds shortest path with weighted edges (uniform in our case)"

    def _search(
        self,
        start: Cell,
        goal: Cell,
        neighbors: NeighborFn,
        grid: Grid,
    ) -> Iterator[Cell]:
        start.cost_from_start = 0
        frontier: PriorityQueue[Cell] = PriorityQueue()
        for cell in grid:
            frontier.push(cell, cell.cost_from_start, seq=_row_major_index(grid, cell))

        while frontier:
            cost, current = frontier.pop()
            if current.is_wall or current.visited or cost != current.cost_from_start:
                continue
            if cost == inf:
                logger.debug("Remaining cells are unreachable")
                break
            if current is goal:
                break

            current.visited = True
            yield current

            for neighbor in neighbors(current):
                if neighbor.visited or neighbor.is_wall:
                    continue
                alt = current.cost_from_start + 1
                if alt < neighbor.cost_from_start:
                    neighbor.cost_from_start = alt
                    neighbor.predecessor = current
                    frontier.push(neighbor, alt, seq=_row_major_index(grid, neighbor))
