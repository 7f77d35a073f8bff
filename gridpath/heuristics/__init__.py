"""
Heuristics module.

Provides distance estimates for guiding informed search:
- manhattan: |d_row| + |d_col|, admissible on 4-connected unit-cost grids
"""

from gridpath.heuristics.distance import manhattan

__all__ = ["manhattan"]
