"""
Path reconstruction from predecessor links.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridpath.grid.cell import Cell


class _NoPath:
    """Sentinel for an unreachable goal. Falsy and empty."""

    _instance: _NoPath | None = None

    def __new__(cls) -> _NoPath:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __len__(self) -> int:
        return 0

    def __iter__(self):
        return iter(())

    def __repr__(self) -> str:
        return "NO_PATH"


NO_PATH = _NoPath()


def reconstruct_path(start: Cell, goal: Cell) -> list[Cell] | _NoPath:
    """
    Walk predecessor links from goal back to start.

    Args:
        start: Start cell of the finished run
        goal: Goal cell of the finished run

    Returns:
        Cells ordered start -> goal, [goal] when start is goal,
        or NO_PATH if the goal was never reached
    """
    if goal.predecessor is None:
        return [goal] if goal is start else NO_PATH

    path = []
    current: Cell | None = goal
    while current is not None:
        path.append(current)
        current = current.predecessor
    path.reverse()
    return path


def path_length(path: list[Cell] | _NoPath) -> int | None:
    """Number of edges in a path, or None for NO_PATH."""
    if path is NO_PATH:
        return None
    return len(path) - 1
