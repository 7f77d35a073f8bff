"""
Comparison harness: every algorithm on its own snapshot of one grid.

Snapshots are taken for all algorithms before the first one starts, so
no run can observe another's scratch state and the caller's grid is
never touched.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gridpath.algorithms import available_algorithms, get_algorithm, validate_endpoints
from gridpath.config import get_diagonal_enabled
from gridpath.engine import RunResult, TraversalEngine

if TYPE_CHECKING:
    from gridpath.grid.cell import Cell
    from gridpath.grid.model import Grid
    from gridpath.grid.session import GridSession

logger = logging.getLogger(__name__)


@dataclass
class ComparisonReport:
    """
    Ranked results of one comparison.

    Behaves as a sequence of RunResult sorted by elapsed time, fastest
    first. Ranking ignores success: a quick failure can rank above a
    slower success. Check is_fastest_success (or fastest_success) for
    the best run that actually reached the goal.

    Attributes:
        results: One RunResult per algorithm, ascending elapsed time
        total_time_ms: Wall-clock time of the whole comparison
        rows: Grid height
        cols: Grid width
        wall_count: Walls in the compared layout
        diagonal: Whether 8-directional movement was used
    """

    results: list[RunResult] = field(default_factory=list)
    total_time_ms: float = 0.0
    rows: int = 0
    cols: int = 0
    wall_count: int = 0
    diagonal: bool = False

    def __iter__(self) -> Iterator[RunResult]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def __getitem__(self, index: int) -> RunResult:
        return self.results[index]

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols

    @property
    def fastest_success(self) -> RunResult | None:
        """Quickest run that reached the goal, if any did."""
        for result in self.results:
            if result.is_fastest_success:
                return result
        return None

    def by_algorithm(self, algorithm_id: str) -> RunResult:
        """
        Look up one algorithm's result.

        Raises:
            KeyError: If the algorithm was not part of the comparison
        """
        for result in self.results:
            if result.algorithm_id == algorithm_id:
                return result
        raise KeyError(algorithm_id)


def rank_results(results: Iterable[RunResult]) -> list[RunResult]:
    """
    Sort by elapsed time and flag the fastest successful run.

    Sorting is stable, so equal times keep issue order.
    """
    ranked = sorted(results, key=lambda r: r.elapsed_time_ms)
    for result in ranked:
        result.is_fastest_success = False
    for result in ranked:
        if result.success:
            result.is_fastest_success = True
            break
    return ranked


def compare_all(
    grid: Grid,
    start: Cell,
    goal: Cell,
    diagonal: bool | None = None,
    algorithms: Iterable[str] | None = None,
    engine: TraversalEngine | None = None,
) -> ComparisonReport:
    """
    Run every algorithm against an independent clone of the grid.

    Args:
        grid: Source grid (never mutated)
        start: Start cell of grid
        goal: Goal cell of grid
        diagonal: 8-directional movement; None reads the environment
        algorithms: Ids to compare (default: all registered, in order)
        engine: Engine used for the runs

    Returns:
        ComparisonReport ranked by elapsed time

    Raises:
        InvalidEndpointsError: If start/goal are invalid (nothing is run)
    """
    validate_endpoints(grid, start, goal)
    algorithm_ids = list(algorithms) if algorithms is not None else list(available_algorithms())
    diagonal = get_diagonal_enabled() if diagonal is None else diagonal
    engine = engine or TraversalEngine()

    wall_mask = grid.wall_mask()
    snapshots = {algorithm_id: grid.clone() for algorithm_id in algorithm_ids}

    logger.info(
        f"Comparing {len(algorithm_ids)} algorithms on {grid.rows}x{grid.cols} grid "
        f"({int(wall_mask.sum())} walls, diagonal={diagonal})"
    )

    results: list[RunResult] = []
    t0 = time.perf_counter()
    for algorithm_id in algorithm_ids:
        snapshot = snapshots[algorithm_id]
        run_t0 = time.perf_counter()
        try:
            algorithm = get_algorithm(algorithm_id)
            run = engine.execute(
                algorithm,
                snapshot,
                snapshot.cell(start.row, start.col),
                snapshot.cell(goal.row, goal.col),
                diagonal,
                record_trace=False,
            )
            results.append(run.result)
        except Exception as e:
            logger.warning(f"{algorithm_id} failed during comparison: {e}")
            elapsed_ms = (time.perf_counter() - run_t0) * 1000
            results.append(RunResult.failed(algorithm_id, str(e), elapsed_ms))
    total_time_ms = (time.perf_counter() - t0) * 1000

    ranked = rank_results(results)
    fastest = next((r for r in ranked if r.is_fastest_success), None)
    if fastest is not None:
        logger.info(f"Fastest successful: {fastest.algorithm_id} ({fastest.elapsed_time_ms:.2f}ms)")
    else:
        logger.warning("No algorithm reached the goal")

    return ComparisonReport(
        results=ranked,
        total_time_ms=total_time_ms,
        rows=grid.rows,
        cols=grid.cols,
        wall_count=int(wall_mask.sum()),
        diagonal=diagonal,
    )


def compare_session(session: GridSession, algorithms: Iterable[str] | None = None) -> ComparisonReport:
    """Compare all algorithms on a session's grid and endpoints."""
    return compare_all(
        session.grid,
        session.start,
        session.goal,
        diagonal=session.diagonal,
        algorithms=algorithms,
    )
