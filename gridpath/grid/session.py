"""
Grid session: the grid plus its start/goal selection and diagonal toggle.

The painting layer drives every mutation through this object. It keeps
the start and goal off walls no matter what sequence of calls arrives.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from gridpath.config import (
    FREE_CHAR,
    GOAL_CHAR,
    GRID_COLS,
    GRID_ROWS,
    MAZE_DENSITY,
    PATH_CHAR,
    START_CHAR,
    VISITED_CHAR,
    WALL_CHAR,
    get_diagonal_enabled,
)
from gridpath.grid import model
from gridpath.grid.cell import Cell
from gridpath.grid.model import Grid

logger = logging.getLogger(__name__)

CellRef = Cell | tuple[int, int]


@dataclass
class GridSession:
    """
    Mutable editing state for one grid.

    Attributes:
        rows: Grid height
        cols: Grid width
        diagonal: Whether searches use 8-directional movement
        grid: The cells (built from rows/cols)
        start: Designated start cell, if any
        goal: Designated goal cell, if any
    """

    rows: int = GRID_ROWS
    cols: int = GRID_COLS
    diagonal: bool = field(default_factory=get_diagonal_enabled)
    grid: Grid = field(init=False)
    start: Cell | None = field(default=None, init=False)
    goal: Cell | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.grid = Grid(self.rows, self.cols)

    # -------------------- construction --------------------

    @classmethod
    def from_ascii(cls, text: str | Iterable[str], diagonal: bool = False) -> GridSession:
        """
        Parse a layout drawn with '#' (wall), '.' (free), 'S' and 'G'.

        Blank lines are ignored. All rows must have the same width.

        Raises:
            ValueError: On ragged rows, unknown symbols, or repeated S/G
        """
        lines = text.splitlines() if isinstance(text, str) else list(text)
        rows = [line.strip() for line in lines if line.strip()]
        if not rows:
            raise ValueError("Layout is empty")

        width = len(rows[0])
        if any(len(line) != width for line in rows):
            raise ValueError("Layout rows must all have the same width")

        session = cls(rows=len(rows), cols=width, diagonal=diagonal)
        for r, line in enumerate(rows):
            for c, char in enumerate(line):
                cell = session.grid.cell(r, c)
                if char == WALL_CHAR:
                    cell.is_wall = True
                elif char == START_CHAR:
                    if session.start is not None:
                        raise ValueError("Layout has more than one start")
                    session.start = cell
                elif char == GOAL_CHAR:
                    if session.goal is not None:
                        raise ValueError("Layout has more than one goal")
                    session.goal = cell
                elif char != FREE_CHAR:
                    raise ValueError(f"Unknown layout symbol {char!r} at ({r}, {c})")
        return session

    @classmethod
    def from_file(cls, path: str | Path, diagonal: bool = False) -> GridSession:
        """Load an ASCII layout from a text file."""
        text = Path(path).read_text(encoding="utf-8")
        return cls.from_ascii(text, diagonal=diagonal)

    # -------------------- lookup --------------------

    def cell(self, row: int, col: int) -> Cell:
        return self.grid.cell(row, col)

    def _resolve(self, ref: CellRef) -> Cell:
        if isinstance(ref, Cell):
            if not self.grid.contains(ref):
                raise ValueError(f"Cell {ref.position} does not belong to this grid")
            return ref
        row, col = ref
        return self.grid.cell(row, col)

    def is_endpoint(self, cell: Cell) -> bool:
        return cell is self.start or cell is self.goal

    @property
    def is_ready(self) -> bool:
        """Whether both start and goal are set."""
        return self.start is not None and self.goal is not None

    # -------------------- mutation API --------------------

    def toggle_wall(self, ref: CellRef) -> bool:
        """
        Flip a cell between wall and free.

        Toggling the start or goal is a no-op.

        Returns:
            The cell's wall state after the call
        """
        cell = self._resolve(ref)
        if self.is_endpoint(cell):
            return cell.is_wall
        cell.is_wall = not cell.is_wall
        return cell.is_wall

    def set_wall(self, ref: CellRef, is_wall: bool = True) -> bool:
        """
        Paint a cell as wall or free (drag painting).

        Painting over the start or goal is a no-op.

        Returns:
            The cell's wall state after the call
        """
        cell = self._resolve(ref)
        if not self.is_endpoint(cell):
            cell.is_wall = is_wall
        return cell.is_wall

    def set_start(self, ref: CellRef) -> bool:
        """
        Move the start to a cell. A wall there is cleared.

        Returns:
            False if the cell is the goal (start unchanged), else True
        """
        cell = self._resolve(ref)
        if cell is self.goal:
            return False
        cell.is_wall = False
        self.start = cell
        return True

    def set_goal(self, ref: CellRef) -> bool:
        """
        Move the goal to a cell. A wall there is cleared.

        Returns:
            False if the cell is the start (goal unchanged), else True
        """
        cell = self._resolve(ref)
        if cell is self.start:
            return False
        cell.is_wall = False
        self.goal = cell
        return True

    def clear_walls(self) -> int:
        """Remove every wall. Returns the number removed."""
        return model.clear_walls(self.grid)

    def randomize_walls(self, density: float = MAZE_DENSITY, seed: int | None = None) -> int:
        """Random wall layout, never covering start or goal. Returns walls placed."""
        placed = model.randomize_walls(self.grid, density, seed=seed, keep=(self.start, self.goal))
        logger.info(f"Randomized {self.rows}x{self.cols} grid: {placed} walls")
        return placed

    def reset(self) -> None:
        """Discard the grid and the endpoint selection."""
        self.grid = Grid(self.rows, self.cols)
        self.start = None
        self.goal = None

    # -------------------- rendering --------------------

    def to_ascii(self, path: Iterable[Cell] = (), show_visited: bool = False) -> str:
        """
        Render the grid as text.

        Args:
            path: Cells to draw with '*'
            show_visited: Draw visited cells with '+'
        """
        on_path = set(path)
        lines = []
        for r in range(self.rows):
            chars = []
            for c in range(self.cols):
                cell = self.grid.cell(r, c)
                if cell is self.start:
                    chars.append(START_CHAR)
                elif cell is self.goal:
                    chars.append(GOAL_CHAR)
                elif cell.is_wall:
                    chars.append(WALL_CHAR)
                elif cell in on_path:
                    chars.append(PATH_CHAR)
                elif show_visited and cell.visited:
                    chars.append(VISITED_CHAR)
                else:
                    chars.append(FREE_CHAR)
            lines.append("".join(chars))
        return "\n".join(lines)
