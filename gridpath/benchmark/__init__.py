"""
Benchmark module.

Provides the comparison harness:
- compare_all: Runs every algorithm on its own grid snapshot
- compare_session: Same, taking a GridSession
- ComparisonReport: Results ranked by elapsed time plus grid summary
- rank_results: Sorting and fastest-success flagging
"""

from gridpath.benchmark.comparison import (
    ComparisonReport,
    compare_all,
    compare_session,
    rank_results,
)

__all__ = [
    "ComparisonReport",
    "compare_all",
    "compare_session",
    "rank_results",
]
