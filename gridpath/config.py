"""
Configuration constants for the grid pathfinding core.

All grid dimensions, defaults, and tunable parameters are defined here.
Runtime toggles are read from environment variables (optionally via a
.env file in the working directory).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of gridpath/
PROJECT_ROOT = Path(__file__).parent.parent

# Sample ASCII layouts; bare --maze names resolve here
MAZES_DIR = PROJECT_ROOT / "mazes"

# =============================================================================
# Grid Configuration
# =============================================================================

# Default grid dimensions for a new session
GRID_ROWS = 20
GRID_COLS = 40

# Fraction of free cells turned into walls by randomize_walls()
MAZE_DENSITY = 0.3

# ASCII layout symbols
WALL_CHAR = "#"
FREE_CHAR = "."
START_CHAR = "S"
GOAL_CHAR = "G"
VISITED_CHAR = "+"
PATH_CHAR = "*"

# =============================================================================
# Algorithm Configuration
# =============================================================================

# Registered algorithm ids, in the order the comparison harness issues them
ALGORITHM_IDS = ("dijkstra", "astar", "greedy", "bfs", "dfs")

# Algorithm used when none is given explicitly
DEFAULT_ALGORITHM = os.environ.get("GRIDPATH_ALGORITHM", "dijkstra").lower()

_TRUTHY = ("1", "true", "yes", "on")

# 8-directional movement (adds diagonals to N/S/E/W)
DIAGONAL_ENABLED = os.environ.get("GRIDPATH_DIAGONAL", "false").strip().lower() in _TRUTHY

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# =============================================================================
# Runtime Helpers
# =============================================================================

def get_diagonal_enabled() -> bool:
    """Read the diagonal toggle from the environment at call time."""
    value = os.environ.get("GRIDPATH_DIAGONAL")
    if value is None:
        return DIAGONAL_ENABLED
    return value.strip().lower() in _TRUTHY


def get_default_algorithm() -> str:
    """Read the selected algorithm id from the environment at call time."""
    value = os.environ.get("GRIDPATH_ALGORITHM")
    if not value:
        return DEFAULT_ALGORITHM
    return value.strip().lower()


def resolve_maze_path(value: str | Path) -> Path:
    """
    Locate an ASCII layout file.

    An existing path is returned as is. Otherwise a name found in
    MAZES_DIR (e.g., 'corridor.txt') is returned from there. Anything
    else is returned unchanged so the caller reports the missing file.
    """
    path = Path(value)
    if path.exists():
        return path
    candidate = MAZES_DIR / path
    if not path.is_absolute() and candidate.exists():
        return candidate
    return path
