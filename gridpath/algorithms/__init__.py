"""
Algorithms module.

Provides the interchangeable grid search strategies:
- Dijkstra: Cost-ordered shortest path
- AStar: Cost + Manhattan heuristic, shortest path
- GreedyBestFirst: Heuristic only, fast but not optimal
- BreadthFirst: FIFO, shortest path on unit-cost grids
- DepthFirst: LIFO, no optimality guarantee
"""

from gridpath.algorithms.astar import AStar
from gridpath.algorithms.base import AlgorithmInfo, NeighborFn, SearchAlgorithm, validate_endpoints
from gridpath.algorithms.bfs import BreadthFirst
from gridpath.algorithms.dfs import DepthFirst
from gridpath.algorithms.dijkstra import Dijkstra
from gridpath.algorithms.greedy import GreedyBestFirst
from gridpath.config import ALGORITHM_IDS
from gridpath.errors import UnknownAlgorithmError

__all__ = [
    "AlgorithmInfo",
    "NeighborFn",
    "SearchAlgorithm",
    "AStar",
    "BreadthFirst",
    "DepthFirst",
    "Dijkstra",
    "GreedyBestFirst",
    "available_algorithms",
    "get_algorithm",
    "get_algorithm_info",
    "validate_endpoints",
]

_ALGORITHMS: dict[str, type[SearchAlgorithm]] = {
    "dijkstra": Dijkstra,
    "astar": AStar,
    "greedy": GreedyBestFirst,
    "bfs": BreadthFirst,
    "dfs": DepthFirst,
}


def available_algorithms() -> tuple[str, ...]:
    """Registered algorithm ids in comparison order."""
    return ALGORITHM_IDS


def get_algorithm(name: str) -> SearchAlgorithm:
    """
    Get an algorithm by id.

    Args:
        name: Algorithm identifier (dijkstra, astar, greedy, bfs, dfs)

    Returns:
        Instantiated algorithm

    Raises:
        UnknownAlgorithmError: If the id is not registered
    """
    key = name.strip().lower() if isinstance(name, str) else name
    if key not in _ALGORITHMS:
        available = ", ".join(ALGORITHM_IDS)
        raise UnknownAlgorithmError(f"Unknown algorithm '{name}'. Available: {available}")
    return _ALGORITHMS[key]()


def get_algorithm_info(name: str) -> AlgorithmInfo:
    """Display metadata for an algorithm id."""
    return get_algorithm(name).info
