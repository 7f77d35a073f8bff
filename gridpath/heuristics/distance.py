"""
Grid distance heuristics.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridpath.grid.cell import Cell


def manhattan(a: Cell, b: Cell) -> int:
    """Manhattan distance between two cells."""
    return abs(a.row - b.row) + abs(a.col - b.col)
