"""
Exceptions raised by the grid pathfinding core.

An unreachable goal is not an error: it is reported through RunResult
(success=False) and the NO_PATH sentinel.
"""


class GridPathError(Exception):
    """Base class for all gridpath errors."""


class InvalidEndpointsError(GridPathError, ValueError):
    """Start or goal is missing, not part of the grid, or a wall."""


class UnknownAlgorithmError(GridPathError, ValueError):
    """Requested algorithm id is not registered."""
