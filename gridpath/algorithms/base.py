"""
Search algorithm base class for grid traversal strategies.

All algorithms implement _search() as a generator that yields each cell
as it is expanded. explore() validates the endpoints eagerly, resets the
grid's scratch state, and hands back that generator.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from gridpath.errors import InvalidEndpointsError

if TYPE_CHECKING:
    from gridpath.grid.cell import Cell
    from gridpath.grid.model import Grid

NeighborFn = Callable[["Cell"], "list[Cell]"]


@dataclass(frozen=True)
class AlgorithmInfo:
    """
    Descriptive metadata shown next to comparison results.

    Attributes:
        algorithm_id: Registry key (e.g., 'astar')
        name: Display name
        time_complexity: Big-O time
        space_complexity: Big-O space
        description: One-line summary
        optimal: Whether it guarantees a shortest path on unit-cost grids
    """

    algorithm_id: str
    name: str
    time_complexity: str
    space_complexity: str
    description: str
    optimal: bool


def validate_endpoints(grid: Grid, start: Cell | None, goal: Cell | None) -> None:
    """
    Check the traversal preconditions.

    Raises:
        InvalidEndpointsError: If start or goal is missing, foreign to the
            grid, or a wall
    """
    for label, cell in (("start", start), ("goal", goal)):
        if cell is None:
            raise InvalidEndpointsError(f"Please set both start and goal ({label} is missing)")
        if not grid.contains(cell):
            raise InvalidEndpointsError(f"The {label} cell {cell.position} does not belong to this grid")
        if cell.is_wall:
            raise InvalidEndpointsError(f"The {label} cell {cell.position} is a wall")


class SearchAlgorithm(ABC):
    """
    Abstract base class for grid search strategies.

    Strategies differ in frontier (queue, stack, heap) and in how they
    relax neighbors. All of them stop when the goal is selected for
    expansion, not when it is first discovered, so the goal is never
    yielded.
    """

    # Display metadata, overridden by subclasses
    display_name: str = ""
    time_complexity: str = ""
    space_complexity: str = ""
    optimal: bool = False

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry identifier (e.g., 'dijkstra', 'bfs')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the strategy."""
        ...

    @property
    def info(self) -> AlgorithmInfo:
        return AlgorithmInfo(
            algorithm_id=self.name,
            name=self.display_name,
            time_complexity=self.time_complexity,
            space_complexity=self.space_complexity,
            description=self.description,
            optimal=self.optimal,
        )

    def explore(
        self,
        grid: Grid,
        start: Cell,
        goal: Cell,
        neighbors: NeighborFn,
    ) -> Iterator[Cell]:
        """
        Start a traversal and return the lazy expansion sequence.

        Endpoints are validated and scratch state is reset before this
        returns, so errors surface here rather than on first iteration.

        Args:
            grid: Grid to traverse (its cells' scratch state is mutated)
            start: Start cell, belonging to grid
            goal: Goal cell, belonging to grid
            neighbors: Adjacency function, fixed for the whole run

        Returns:
            Iterator over expanded cells, in expansion order

        Raises:
            InvalidEndpointsError: If the endpoints are invalid
        """
        validate_endpoints(grid, start, goal)
        grid.reset_all()
        return self._search(start, goal, neighbors, grid)

    @abstractmethod
    def _search(
        self,
        start: Cell,
        goal: Cell,
        neighbors: NeighborFn,
        grid: Grid,
    ) -> Iterator[Cell]:
        """Generator body of the traversal. Yields each expanded cell."""
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
