#!/usr/bin/env python3
"""
Grid Pathfinder CLI - Run one search algorithm and draw what it explored.

Usage:
    python scripts/play.py --maze mazes/corridor.txt
    python scripts/play.py --maze corridor.txt --algorithm astar --diagonal
    python scripts/play.py --rows 20 --cols 40 --density 0.3 --seed 7 --algorithm dfs
    python scripts/play.py --rows 10 --cols 10 --start 0,0 --goal 9,9 --steps

Algorithms:
    dijkstra - Dijkstra's algorithm (shortest path)
    astar    - A* with Manhattan heuristic (shortest path)
    greedy   - Greedy best-first (fast, not optimal)
    bfs      - Breadth-first search (shortest path)
    dfs      - Depth-first search (not optimal)

Legend:
    S start, G goal, # wall, + visited, * path
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gridpath.algorithms import get_algorithm_info  # noqa: E402
from gridpath.config import (  # noqa: E402
    ALGORITHM_IDS,
    GRID_COLS,
    GRID_ROWS,
    LOG_LEVEL,
    MAZE_DENSITY,
    get_default_algorithm,
    get_diagonal_enabled,
    resolve_maze_path,
)
from gridpath.engine import TraversalEngine  # noqa: E402
from gridpath.grid import GridSession  # noqa: E402


def parse_position(value: str) -> tuple[int, int]:
    """Parse 'row,col'."""
    try:
        row, col = (int(part) for part in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected ROW,COL, got '{value}'")
    return row, col


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run a grid search algorithm",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--algorithm",
        "-a",
        type=str,
        default=get_default_algorithm(),
        choices=ALGORITHM_IDS,
        help="Algorithm to run (default: GRIDPATH_ALGORITHM or dijkstra)",
    )
    parser.add_argument(
        "--maze",
        type=resolve_maze_path,
        default=None,
        help="ASCII layout file or a name in mazes/ (S start, G goal, # wall, . free)",
    )
    parser.add_argument("--rows", type=int, default=GRID_ROWS, help=f"Random grid rows (default: {GRID_ROWS})")
    parser.add_argument("--cols", type=int, default=GRID_COLS, help=f"Random grid columns (default: {GRID_COLS})")
    parser.add_argument(
        "--density",
        type=float,
        default=MAZE_DENSITY,
        help=f"Random wall density (default: {MAZE_DENSITY})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for wall layout")
    parser.add_argument("--start", type=parse_position, default=None, help="Start cell ROW,COL")
    parser.add_argument("--goal", type=parse_position, default=None, help="Goal cell ROW,COL")
    parser.add_argument(
        "--diagonal",
        action="store_true",
        default=get_diagonal_enabled(),
        help="Allow diagonal moves (default: GRIDPATH_DIAGONAL)",
    )
    parser.add_argument(
        "--steps",
        action="store_true",
        help="Print every expansion in order",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def build_session(args: argparse.Namespace) -> GridSession:
    """Load the layout file or roll a random grid."""
    if args.maze is not None:
        session = GridSession.from_file(args.maze, diagonal=args.diagonal)
    else:
        session = GridSession(rows=args.rows, cols=args.cols, diagonal=args.diagonal)

    if args.start is not None:
        if not session.set_start(args.start):
            raise ValueError(f"Start {args.start} is already the goal cell")
    elif session.start is None:
        session.set_start((0, 0))

    if args.goal is not None:
        if not session.set_goal(args.goal):
            raise ValueError(f"Goal {args.goal} is already the start cell")
    elif session.goal is None:
        session.set_goal((session.rows - 1, session.cols - 1))
    if not session.is_ready:
        raise ValueError("Start and goal must be different cells")

    if args.maze is None:
        session.randomize_walls(args.density, seed=args.seed)
    return session


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        session = build_session(args)
        info = get_algorithm_info(args.algorithm)
        run = TraversalEngine().run_session(session, args.algorithm)
    except (OSError, ValueError, IndexError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\n" + "=" * 60)
    print(f"  {info.name}  ({info.time_complexity} time, {info.space_complexity} space)")
    print(f"  {info.description}")
    print(f"  Grid: {session.rows} x {session.cols}, diagonal={session.diagonal}")
    print("=" * 60 + "\n")

    if args.steps:
        for event in run.trace:
            print(f"  step {event.step_index:4}: {event.position}")
        print()

    print(session.to_ascii(path=run.path, show_visited=True))

    result = run.result
    print("\n" + "=" * 60)
    if result.success:
        print(f"Path length: {result.path_length}")
    else:
        print("No path found!")
    print(f"Visited nodes: {result.visited_count}")
    print(f"Time: {result.elapsed_time_ms:.2f} ms")
    print("=" * 60)

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
