"""
Greedy best-first search.
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


class GreedyBestFirst(SearchAlgorithm):
    """
    Expands whichever frontier cell looks closest to the goal.

    Accumulated cost is ignored and a cell's predecessor is fixed the
    first time it is discovered, so the path found is not necessarily
    the shortest one.
    """

    display_name = "Greedy Best-First"
    time_complexity = "O(b^d) - not optimal"
    space_complexity = "O(b^d)"

    @property
    def name(self) -> str:
        return "greedy"

    @property
    def description(self) -> str:
        return "Prioritizes nodes closer to goal, may not find shortest path"

    def _search(
        self,
        start: Cell,
        goal: Cell,
        neighbors: NeighborFn,
        grid: Grid,
    ) -> Iterator[Cell]:
        frontier: PriorityQueue[Cell] = PriorityQueue()
        frontier.push(start, manhattan(start, goal))
        discovered = {start}

        while frontier:
            _, current = frontier.pop()
            if current is goal:
                break

            current.visited = True
            yield current

            for neighbor in neighbors(current):
                if neighbor.visited or neighbor.is_wall or neighbor in discovered:
                    continue
                neighbor.predecessor = current
                discovered.add(neighbor)
                frontier.push(neighbor, manhattan(neighbor, goal))
