"""
A* search with the Manhattan heuristic.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from gridpath.algorithms.base import NeighborFn, SearchAlgorithm
from gridpath.algorithms.frontier import PriorityQueue
from gridpath.heuristics import manhattan

if TYPE_CHECKING:
    from gridpath.grid.cell import Cell
    from gridpath.grid.model import Grid


class AStar(SearchAlgorithm):
    """
    Best-first search on f = cost_from_start + manhattan(cell, goal).

    Only discovered cells are in the frontier. A cost decrease pushes a
    fresh entry; the older entry is skipped once the cell is expanded.
    """

    display_name = "A* Search"
    time_complexity = "O(E) - O(b^d) with good heuristic"
    space_complexity = "O(V)"
    optimal = True

    @property
    def name(self) -> str:
        return "astar"

    @property
    def description(self) -> str:
        return "Uses heuristic to find path faster, optimal with admissible heuristic"

    def _search(
        self,
        start: Cell,
        goal: Cell,
        neighbors: NeighborFn,
        grid: Grid,
    ) -> Iterator[Cell]:
        start.cost_from_start = 0
        frontier: PriorityQueue[Cell] = PriorityQueue()
        frontier.push(start, manhattan(start, goal))

        while frontier:
            _, current = frontier.pop()
            if current.visited:
                continue
            if current is goal:
                break

            current.visited = True
            yield current

            for neighbor in neighbors(current):
                if neighbor.visited or neighbor.is_wall:
                    continue
                tentative = current.cost_from_start + 1
                if tentative < neighbor.cost_from_start:
                    neighbor.cost_from_start = tentative
                    neighbor.predecessor = current
                    frontier.push(neighbor, tentative + manhattan(neighbor, goal))
