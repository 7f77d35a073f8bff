#!/usr/bin/env python3
"""
Compare all five search algorithms on the same grid.

Usage:
    python scripts/compare.py --maze mazes/corridor.txt
    python scripts/compare.py --rows 20 --cols 40 --seed 3 --diagonal
    python scripts/compare.py --maze open.txt --chart comparison.html

Results are ranked by time, fastest first, whether or not the algorithm
reached the goal. The fastest run that did reach it is marked.
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
from gridpath.benchmark import compare_session  # noqa: E402
from gridpath.config import (  # noqa: E402
    GRID_COLS,
    GRID_ROWS,
    MAZE_DENSITY,
    get_diagonal_enabled,
    resolve_maze_path,
)
from gridpath.grid import GridSession  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Compare grid search algorithms",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--maze", type=resolve_maze_path, default=None, help="ASCII layout file or a name in mazes/")
    parser.add_argument("--rows", type=int, default=GRID_ROWS, help=f"Random grid rows (default: {GRID_ROWS})")
    parser.add_argument("--cols", type=int, default=GRID_COLS, help=f"Random grid columns (default: {GRID_COLS})")
    parser.add_argument(
        "--density",
        type=float,
        default=MAZE_DENSITY,
        help=f"Random wall density (default: {MAZE_DENSITY})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for wall layout")
    parser.add_argument(
        "--diagonal",
        action="store_true",
        default=get_diagonal_enabled(),
        help="Allow diagonal moves (default: GRIDPATH_DIAGONAL)",
    )
    parser.add_argument(
        "--chart",
        type=Path,
        default=None,
        help="Write time and visited-node charts to this HTML file",
    )
    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()
    logging.basicConfig(level=logging.WARNING)  # Quiet mode

    try:
        if args.maze is not None:
            session = GridSession.from_file(args.maze, diagonal=args.diagonal)
        else:
            session = GridSession(rows=args.rows, cols=args.cols, diagonal=args.diagonal)
            session.set_start((0, 0))
            session.set_goal((args.rows - 1, args.cols - 1))
            session.randomize_walls(args.density, seed=args.seed)
        report = compare_session(session)
    except (OSError, ValueError, IndexError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("=" * 78)
    print("Grid Pathfinder - Algorithm Comparison")
    print("=" * 78)
    print(f"  {'Algorithm':24} {'Time (ms)':>10} {'Visited':>8} {'Path':>6}  Status")
    print("-" * 78)

    for result in report:
        name = get_algorithm_info(result.algorithm_id).name
        path = str(result.path_length) if result.success else "N/A"
        badge = "  << Fastest" if result.is_fastest_success else ""
        print(
            f"  {name:24} {result.elapsed_time_ms:10.2f} {result.visited_count:8} {path:>6}  "
            f"{result.status}{badge}"
        )
        if result.error:
            print(f"      error: {result.error}")

    print("\n" + "=" * 78)
    print("Comparison Summary")
    print("=" * 78)
    print(f"  Total comparison time: {report.total_time_ms:.2f} ms")
    print(f"  Grid size: {report.rows} x {report.cols} ({report.cell_count} nodes)")
    print(f"  Walls: {report.wall_count} nodes")

    if args.chart is not None:
        from ui.components.charts import create_time_chart, create_visited_chart

        with open(args.chart, "w", encoding="utf-8") as f:
            f.write(create_time_chart(report).to_html(full_html=False, include_plotlyjs="cdn"))
            f.write(create_visited_chart(report).to_html(full_html=False, include_plotlyjs=False))
        print(f"\nCharts saved to {args.chart}")

    return 0 if report.fastest_success is not None else 1


if __name__ == "__main__":
    sys.exit(main())
