"""
Cell dataclass for a single grid location.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from math import inf


@dataclass(eq=False)
class Cell:
    """
    One addressable grid location.

    Cells compare and hash by identity: two grids built from the same
    layout never share cells.

    Attributes:
        row: 0-based row index (immutable)
        col: 0-based column index (immutable)
        is_wall: User-painted obstacle flag, persists across runs
        cost_from_start: Per-run scratch, accumulated edge cost from start
        visited: Per-run scratch, set when the cell is expanded or discovered
        predecessor: Per-run scratch, cell that first reached this one
    """

    row: int
    col: int
    is_wall: bool = False
    cost_from_start: float = inf
    visited: bool = False
    predecessor: Cell | None = field(default=None, repr=False)

    def __setattr__(self, name: str, value) -> None:
        if name in ("row", "col") and name in self.__dict__:
            raise AttributeError(f"Cell.{name} is immutable")
        super().__setattr__(name, value)

    @property
    def position(self) -> tuple[int, int]:
        """(row, col) coordinates."""
        return (self.row, self.col)

    def reset(self) -> None:
        """Restore scratch fields. Leaves is_wall untouched."""
        self.cost_from_start = inf
        self.visited = False
        self.predecessor = None
