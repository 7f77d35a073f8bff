"""
Traversal engine module.

Provides run execution and result types:
- TraversalEngine: Runs an algorithm live or to completion
- RunResult: Metrics of one run
- ExpansionEvent: One expanded cell with its step index
- SingleRun: Trace + result + path for a renderer
- reconstruct_path / path_length / NO_PATH: Path reconstruction
"""

from gridpath.engine.engine import TraversalEngine, run_single
from gridpath.engine.path import NO_PATH, path_length, reconstruct_path
from gridpath.engine.state import ExpansionEvent, RunResult, SingleRun

__all__ = [
    "TraversalEngine",
    "run_single",
    "ExpansionEvent",
    "RunResult",
    "SingleRun",
    "NO_PATH",
    "path_length",
    "reconstruct_path",
]
