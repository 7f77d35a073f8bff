"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from gridpath.engine import TraversalEngine
from gridpath.grid import GridSession

CORRIDOR = """
S.....#.............
.####.#.#########...
.#....#.#.......#...
.#.####.#.#####.#...
.#......#.#...#.#...
.########.#.#.#.#...
..........#.#...#..G
"""

# Column 4 is a full wall: no route in 4 or 8 directions
BLOCKED = """
S...#....
....#....
....#....
....#...G
"""

# Goal walled in on every side, diagonals included
ENCLOSED = """
S......
...###.
...#G#.
...###.
"""


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def mazes_dir(project_root: Path) -> Path:
    """Return the sample layouts directory."""
    return project_root / "mazes"


@pytest.fixture
def engine() -> TraversalEngine:
    """Engine with 4-directional movement regardless of environment."""
    return TraversalEngine(diagonal=False)


@pytest.fixture
def open_session() -> GridSession:
    """5x5 grid, no walls, start (0,0), goal (4,4)."""
    session = GridSession(rows=5, cols=5, diagonal=False)
    session.set_start((0, 0))
    session.set_goal((4, 4))
    return session


@pytest.fixture
def corridor_session() -> GridSession:
    """Winding maze whose shortest route is 39 steps."""
    return GridSession.from_ascii(CORRIDOR)


@pytest.fixture
def blocked_session() -> GridSession:
    """Start and goal separated by a full wall column."""
    return GridSession.from_ascii(BLOCKED)


@pytest.fixture
def enclosed_session() -> GridSession:
    """Goal surrounded by walls."""
    return GridSession.from_ascii(ENCLOSED)


@pytest.fixture
def algorithm_ids() -> tuple[str, ...]:
    """All registered algorithm ids."""
    return ("dijkstra", "astar", "greedy", "bfs", "dfs")
