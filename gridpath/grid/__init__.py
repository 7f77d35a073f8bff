"""
Grid model module.

Provides the grid and its editing state:
- Cell: One grid location with wall flag and traversal scratch fields
- Grid: Fixed-size cell rectangle with neighbor lookup and cloning
- GridSession: Grid plus start/goal selection and the mutation API
- clear_walls / randomize_walls: Whole-grid wall edits
"""

from gridpath.grid.cell import Cell
from gridpath.grid.model import Grid, clear_walls, randomize_walls
from gridpath.grid.session import GridSession

__all__ = [
    "Cell",
    "Grid",
    "GridSession",
    "clear_walls",
    "randomize_walls",
]
