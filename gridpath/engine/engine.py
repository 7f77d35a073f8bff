"""
Traversal engine: runs a search algorithm on a grid and collects results.

The engine never paces or renders anything. Live callers either take the
finished trace from run_single() or pull expansion events one at a time
from iter_expansions() at whatever speed they like.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from functools import partial
from typing import TYPE_CHECKING

from gridpath.algorithms import SearchAlgorithm, get_algorithm
from gridpath.config import get_default_algorithm, get_diagonal_enabled
from gridpath.engine.path import NO_PATH, path_length, reconstruct_path
from gridpath.engine.state import ExpansionEvent, RunResult, SingleRun

if TYPE_CHECKING:
    from gridpath.grid.cell import Cell
    from gridpath.grid.model import Grid
    from gridpath.grid.session import GridSession

logger = logging.getLogger(__name__)


class TraversalEngine:
    """
    Runs grid search algorithms and measures them.

    The diagonal toggle is resolved once per run (explicit argument, then
    the engine default, then the environment) and the same neighbor
    function is used for the whole run.
    """

    def __init__(self, diagonal: bool | None = None) -> None:
        """
        Initialize the engine.

        Args:
            diagonal: Default 8-directional setting; None reads the
                environment on every run
        """
        self._diagonal = diagonal

    def _resolve_diagonal(self, diagonal: bool | None) -> bool:
        if diagonal is not None:
            return diagonal
        if self._diagonal is not None:
            return self._diagonal
        return get_diagonal_enabled()

    def iter_expansions(
        self,
        algorithm_id: str,
        grid: Grid,
        start: Cell,
        goal: Cell,
        diagonal: bool | None = None,
    ) -> Iterator[ExpansionEvent]:
        """
        Start a run and return its expansion events lazily.

        Each call restarts the traversal from fresh scratch state. The
        returned iterator is finite and can be consumed once. When it is
        exhausted the grid holds the finished run, ready for
        reconstruct_path().

        Raises:
            UnknownAlgorithmError: If algorithm_id is not registered
            InvalidEndpointsError: If start/goal are invalid
        """
        algorithm = get_algorithm(algorithm_id)
        neighbors = partial(grid.neighbors, diagonal=self._resolve_diagonal(diagonal))
        expansions = algorithm.explore(grid, start, goal, neighbors)
        return (ExpansionEvent(cell, step_index) for step_index, cell in enumerate(expansions))

    def execute(
        self,
        algorithm: SearchAlgorithm,
        grid: Grid,
        start: Cell,
        goal: Cell,
        diagonal: bool,
        record_trace: bool = True,
    ) -> SingleRun:
        """
        Run an algorithm to completion with no pauses between steps.

        Args:
            algorithm: Strategy instance
            grid: Grid to traverse (scratch state is mutated)
            start: Start cell of grid
            goal: Goal cell of grid
            diagonal: 8-directional movement for this run
            record_trace: Keep the expansion events (live mode) or drop
                them (comparison mode)

        Returns:
            SingleRun with trace, metrics and path
        """
        neighbors = partial(grid.neighbors, diagonal=diagonal)
        trace: list[ExpansionEvent] = []

        t0 = time.perf_counter()
        expansions = algorithm.explore(grid, start, goal, neighbors)
        for step_index, cell in enumerate(expansions):
            if record_trace:
                trace.append(ExpansionEvent(cell, step_index))
        elapsed_ms = (time.perf_counter() - t0) * 1000

        path = reconstruct_path(start, goal)
        result = RunResult(
            algorithm_id=algorithm.name,
            elapsed_time_ms=elapsed_ms,
            visited_count=grid.visited_count(),
            path_length=path_length(path),
            success=path is not NO_PATH,
        )
        return SingleRun(trace=trace, result=result, path=path)

    def run_single(
        self,
        algorithm_id: str,
        grid: Grid,
        start: Cell,
        goal: Cell,
        diagonal: bool | None = None,
    ) -> SingleRun:
        """
        Run one algorithm on the given grid for live display.

        Args:
            algorithm_id: Registry id (dijkstra, astar, greedy, bfs, dfs)
            grid: Grid to traverse; its cells keep the run's scratch state
            start: Start cell of grid
            goal: Goal cell of grid
            diagonal: 8-directional movement; None uses the engine default

        Returns:
            SingleRun with the full trace, metrics and path

        Raises:
            UnknownAlgorithmError: If algorithm_id is not registered
            InvalidEndpointsError: If start/goal are invalid
        """
        algorithm = get_algorithm(algorithm_id)
        diagonal = self._resolve_diagonal(diagonal)
        logger.info(
            f"Running {algorithm.name} on {grid.rows}x{grid.cols} grid "
            f"(diagonal={diagonal})"
        )

        run = self.execute(algorithm, grid, start, goal, diagonal)
        result = run.result

        if result.success:
            logger.info(
                f"{algorithm.name}: path of {result.path_length} steps, "
                f"{result.visited_count} cells visited in {result.elapsed_time_ms:.2f}ms"
            )
        else:
            logger.warning(
                f"{algorithm.name}: no path from {start.position} to {goal.position} "
                f"({result.visited_count} cells visited)"
            )
        return run

    def run_session(self, session: GridSession, algorithm_id: str | None = None) -> SingleRun:
        """Run on a session's grid, endpoints and diagonal setting."""
        return self.run_single(
            algorithm_id or get_default_algorithm(),
            session.grid,
            session.start,
            session.goal,
            diagonal=session.diagonal,
        )


def run_single(
    algorithm_id: str,
    grid: Grid,
    start: Cell,
    goal: Cell,
    diagonal: bool | None = None,
) -> SingleRun:
    """Module-level shortcut for TraversalEngine().run_single()."""
    return TraversalEngine().run_single(algorithm_id, grid, start, goal, diagonal)
