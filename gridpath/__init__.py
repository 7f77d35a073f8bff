"""
Grid Pathfinding Visualizer core.

A traversal engine that explores a painted grid with five search
algorithms (Dijkstra, A*, Greedy Best-First, BFS, DFS), reconstructs
the resulting path, and compares all algorithms on identical grid
snapshots.
"""

__version__ = "0.1.0"
