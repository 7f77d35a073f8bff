"""
Result dataclasses for traversal runs.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridpath.engine.path import _NoPath
    from gridpath.grid.cell import Cell


@dataclass(frozen=True)
class ExpansionEvent:
    """
    One cell selected and expanded during a run.

    Attributes:
        cell: The expanded cell
        step_index: 0-based position in the run's expansion order
    """

    cell: Cell
    step_index: int

    @property
    def position(self) -> tuple[int, int]:
        return self.cell.position


@dataclass
class RunResult:
    """
    Metrics of one algorithm run.

    Attributes:
        algorithm_id: Registry id of the algorithm
        elapsed_time_ms: Wall-clock time of the traversal
        visited_count: Cells with visited=True when the run ended
        path_length: Edges in the path (None when the goal was not reached)
        success: Whether the goal was reached
        error: Failure message if the run raised (comparison only)
        is_fastest_success: Set by the comparison on the quickest successful run
    """

    algorithm_id: str
    elapsed_time_ms: float
    visited_count: int
    path_length: int | None
    success: bool
    error: str | None = None
    is_fastest_success: bool = False

    @classmethod
    def failed(cls, algorithm_id: str, error: str, elapsed_time_ms: float = 0.0) -> RunResult:
        """Failure marker for a run that raised."""
        return cls(
            algorithm_id=algorithm_id,
            elapsed_time_ms=elapsed_time_ms,
            visited_count=0,
            path_length=None,
            success=False,
            error=error,
        )

    @property
    def status(self) -> str:
        if self.error is not None:
            return "Error"
        return "Success" if self.success else "Failed"

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class SingleRun:
    """
    Everything a renderer needs to replay one algorithm run.

    Attributes:
        trace: Expansion events in order
        result: Run metrics
        path: Cells start -> goal, or NO_PATH
    """

    trace: list[ExpansionEvent]
    result: RunResult
    path: list[Cell] | _NoPath
