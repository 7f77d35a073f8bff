"""
Grid model: a fixed-size rectangle of cells with O(1) neighbor lookup.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

import numpy as np

from gridpath.config import MAZE_DENSITY
from gridpath.grid.cell import Cell

logger = logging.getLogger(__name__)

# (d_row, d_col) in expansion order: E, S, W, N
ORTHOGONAL_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))

# SE, SW, NE, NW
DIAGONAL_STEPS = ((1, 1), (1, -1), (-1, 1), (-1, -1))


class Grid:
    """
    Rectangular grid of cells, fixed dimensions for its lifetime.

    The grid holds the wall layout and each cell's per-run scratch
    state. Start and goal designation lives on GridSession, not here.
    """

    def __init__(self, rows: int, cols: int) -> None:
        """
        Create an empty (wall-free) grid.

        Args:
            rows: Number of rows (> 0)
            cols: Number of columns (> 0)

        Raises:
            ValueError: If either dimension is not positive
        """
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._cells = [[Cell(r, c) for c in range(cols)] for r in range(rows)]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    def __len__(self) -> int:
        return self._rows * self._cols

    def __iter__(self) -> Iterator[Cell]:
        """Iterate cells in row-major order."""
        for row in self._cells:
            yield from row

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, cols={self._cols}, walls={self.wall_count()})"

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def cell(self, row: int, col: int) -> Cell:
        """
        Get the cell at (row, col).

        Raises:
            IndexError: If the coordinates are outside the grid
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) outside {self._rows}x{self._cols} grid")
        return self._cells[row][col]

    def contains(self, cell: Cell | None) -> bool:
        """Whether this exact cell object belongs to this grid."""
        if cell is None or not self.in_bounds(cell.row, cell.col):
            return False
        return self._cells[cell.row][cell.col] is cell

    def neighbors(self, cell: Cell, diagonal: bool = False) -> list[Cell]:
        """
        In-bounds adjacent cells in fixed order.

        Order is E, S, W, N, then SE, SW, NE, NW when diagonal is set.
        Walls are included; search algorithms filter them.
        """
        steps = ORTHOGONAL_STEPS + DIAGONAL_STEPS if diagonal else ORTHOGONAL_STEPS
        out: list[Cell] = []
        for dr, dc in steps:
            r, c = cell.row + dr, cell.col + dc
            if 0 <= r < self._rows and 0 <= c < self._cols:
                out.append(self._cells[r][c])
        return out

    def reset(self, cell: Cell) -> None:
        """Restore one cell's scratch fields."""
        cell.reset()

    def reset_all(self) -> None:
        """Restore every cell's scratch fields."""
        for cell in self:
            cell.reset()

    def clone(self) -> Grid:
        """
        Independent copy of the wall layout.

        Coordinates and is_wall are copied; scratch state starts fresh.
        """
        copy = Grid(self._rows, self._cols)
        for cell in self:
            if cell.is_wall:
                copy._cells[cell.row][cell.col].is_wall = True
        return copy

    def wall_mask(self) -> np.ndarray:
        """Wall layout as a (rows, cols) boolean array."""
        return np.array([[cell.is_wall for cell in row] for row in self._cells], dtype=bool)

    def wall_count(self) -> int:
        return int(self.wall_mask().sum())

    def visited_count(self) -> int:
        """Number of cells marked visited by the last traversal."""
        return sum(1 for cell in self if cell.visited)


def clear_walls(grid: Grid) -> int:
    """
    Remove every wall from the grid.

    Returns:
        Number of walls removed
    """
    removed = 0
    for cell in grid:
        if cell.is_wall:
            cell.is_wall = False
            removed += 1
    logger.debug(f"Cleared {removed} walls")
    return removed


def randomize_walls(
    grid: Grid,
    density: float = MAZE_DENSITY,
    seed: int | None = None,
    keep: Iterable[Cell | None] = (),
) -> int:
    """
    Re-roll every cell as wall or free.

    Each cell becomes a wall with probability `density`; cells in `keep`
    (typically the start and goal) are always left free.

    Args:
        grid: Grid to mutate
        density: Wall probability in [0, 1]
        seed: Random seed for reproducibility
        keep: Cells that must never become walls

    Returns:
        Number of walls placed

    Raises:
        ValueError: If density is outside [0, 1]
    """
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"Wall density must be within [0, 1], got {density}")

    rng = np.random.default_rng(seed)
    mask = rng.random(grid.shape) < density
    for cell in keep:
        if cell is not None:
            mask[cell.row, cell.col] = False

    for cell in grid:
        cell.is_wall = bool(mask[cell.row, cell.col])

    placed = int(mask.sum())
    logger.debug(f"Placed {placed} walls at density {density}")
    return placed
