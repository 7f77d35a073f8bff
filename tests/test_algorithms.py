"""
Unit tests for the five search algorithms.

Exact expansion orders are checked on tiny grids; behavioral
properties (optimality, wall exclusion, determinism) on larger ones.
"""

from functools import partial
from math import inf

import pytest

from gridpath.algorithms import (
    AStar,
    BreadthFirst,
    DepthFirst,
    Dijkstra,
    GreedyBestFirst,
    available_algorithms,
    get_algorithm,
    get_algorithm_info,
)
from gridpath.algorithms.frontier import PriorityQueue
from gridpath.engine import NO_PATH, reconstruct_path
from gridpath.errors import InvalidEndpointsError, UnknownAlgorithmError
from gridpath.grid import GridSession


def explore(algorithm_id: str, session: GridSession, diagonal: bool = False) -> list[tuple[int, int]]:
    """Run to completion and return the expanded positions."""
    neighbors = partial(session.grid.neighbors, diagonal=diagonal)
    expansions = get_algorithm(algorithm_id).explore(session.grid, session.start, session.goal, neighbors)
    return [cell.position for cell in expansions]


def path_positions(session: GridSession) -> list[tuple[int, int]]:
    return [cell.position for cell in reconstruct_path(session.start, session.goal)]


class TestRegistry:
    """Test algorithm lookup."""

    @pytest.mark.parametrize("name,cls", [
        ("dijkstra", Dijkstra),
        ("astar", AStar),
        ("greedy", GreedyBestFirst),
        ("bfs", BreadthFirst),
        ("dfs", DepthFirst),
    ])
    def test_get_algorithm(self, name, cls):
        """Each id maps to its strategy."""
        algorithm = get_algorithm(name)
        assert isinstance(algorithm, cls)
        assert algorithm.name == name

    def test_lookup_is_case_insensitive(self):
        """Ids are normalized."""
        assert isinstance(get_algorithm(" AStar "), AStar)

    def test_unknown_algorithm(self):
        """Unknown ids raise, listing the available ones."""
        with pytest.raises(UnknownAlgorithmError, match="Available: dijkstra"):
            get_algorithm("bellman-ford")

    def test_unknown_is_value_error(self):
        """Callers catching ValueError also catch unknown ids."""
        with pytest.raises(ValueError):
            get_algorithm("nope")

    def test_available_order(self, algorithm_ids):
        """Registry order is the comparison issue order."""
        assert available_algorithms() == algorithm_ids

    def test_info(self):
        """Display metadata is exposed."""
        info = get_algorithm_info("greedy")
        assert info.algorithm_id == "greedy"
        assert info.name == "Greedy Best-First"
        assert info.optimal is False
        assert get_algorithm_info("bfs").optimal is True


class TestPriorityQueue:
    """Test the heap frontier."""

    def test_pops_lowest_first(self):
        """Lower priority pops first."""
        pq = PriorityQueue()
        pq.push("b", 2)
        pq.push("a", 1)
        assert pq.pop() == (1, "a")
        assert pq.pop() == (2, "b")
        assert not pq

    def test_ties_pop_in_insertion_order(self):
        """Equal priorities are stable."""
        pq = PriorityQueue()
        for item in ("first", "second", "third"):
            pq.push(item, 5)
        assert [pq.pop()[1] for _ in range(3)] == ["first", "second", "third"]

    def test_unorderable_items(self):
        """Items themselves are never compared."""
        pq = PriorityQueue()
        pq.push({"x": 1}, 0)
        pq.push({"y": 2}, 0)
        assert len(pq) == 2
        assert pq.pop() == (0, {"x": 1})

    def test_explicit_sequence(self):
        """A caller-supplied sequence number breaks ties instead of push order."""
        pq = PriorityQueue()
        pq.push("late", 1, seq=9)
        pq.push("early", 1, seq=2)
        pq.push("cheap", 0, seq=50)
        assert [pq.pop()[1] for _ in range(3)] == ["cheap", "early", "late"]


class TestExpansionOrder:
    """Exact traces on a 2x2 open grid, start (0,0), goal (1,1)."""

    @pytest.fixture
    def square(self) -> GridSession:
        return GridSession.from_ascii("S.\n.G")

    def test_bfs(self, square):
        """BFS expands in queue order and routes via the east cell."""
        assert explore("bfs", square) == [(0, 0), (0, 1), (1, 0)]
        assert path_positions(square) == [(0, 0), (0, 1), (1, 1)]
        assert square.grid.visited_count() == 4

    def test_dfs(self, square):
        """DFS follows the last discovered neighbor (south)."""
        assert explore("dfs", square) == [(0, 0), (1, 0)]
        assert path_positions(square) == [(0, 0), (1, 0), (1, 1)]
        assert square.grid.visited_count() == 4

    def test_dijkstra(self, square):
        """Dijkstra breaks cost ties by row-major position."""
        assert explore("dijkstra", square) == [(0, 0), (0, 1), (1, 0)]
        assert path_positions(square) == [(0, 0), (0, 1), (1, 1)]
        assert square.grid.visited_count() == 3

    def test_astar(self, square):
        """A* expands both f=2 cells before popping the goal."""
        assert explore("astar", square) == [(0, 0), (0, 1), (1, 0)]
        assert path_positions(square) == [(0, 0), (0, 1), (1, 1)]
        assert square.grid.visited_count() == 3

    def test_greedy(self, square):
        """Greedy heads straight for the goal."""
        assert explore("greedy", square) == [(0, 0), (0, 1)]
        assert path_positions(square) == [(0, 0), (0, 1), (1, 1)]
        assert square.grid.visited_count() == 2


def sorted_list_dijkstra(session: GridSession, diagonal: bool = False) -> list[tuple[int, int]]:
    """Expansion order of Dijkstra over a row-major cell list re-sorted (stably) by cost each step."""
    grid = session.grid
    cost = {cell: inf for cell in grid}
    cost[session.start] = 0
    settled = set()
    unvisited = [cell for cell in grid if not cell.is_wall]
    order = []
    while unvisited:
        unvisited.sort(key=lambda cell: cost[cell])
        current = unvisited.pop(0)
        if cost[current] == inf or current is session.goal:
            break
        settled.add(current)
        order.append(current.position)
        for neighbor in grid.neighbors(current, diagonal=diagonal):
            if neighbor not in settled and not neighbor.is_wall:
                cost[neighbor] = min(cost[neighbor], cost[current] + 1)
    return order


class TestDijkstraTieOrder:
    """Equal-cost cells are expanded in row-major order."""

    def test_mid_grid_start(self):
        """Each cost ring is expanded top-left to bottom-right."""
        session = GridSession.from_ascii(
            ".......\n"
            ".......\n"
            ".......\n"
            "...S...\n"
            ".......\n"
            "....G..\n"
            "......."
        )
        assert explore("dijkstra", session) == [
            (3, 3),
            (2, 3), (3, 2), (3, 4), (4, 3),
            (1, 3), (2, 2), (2, 4), (3, 1), (3, 5), (4, 2), (4, 4), (5, 3),
            (0, 3), (1, 2), (1, 4), (2, 1), (2, 5), (3, 0), (3, 6), (4, 1), (4, 5), (5, 2),
        ]
        assert session.grid.visited_count() == 23

    @pytest.mark.parametrize("diagonal", [False, True])
    @pytest.mark.parametrize("seed", range(20))
    def test_matches_sorted_list(self, seed, diagonal):
        """Same order and visited count as repeatedly sorting the cell list."""
        session = GridSession(rows=10, cols=14, diagonal=diagonal)
        session.set_start((0, 0))
        session.set_goal((9, 13))
        session.randomize_walls(0.25, seed=seed)

        expected = sorted_list_dijkstra(session, diagonal=diagonal)
        assert explore("dijkstra", session, diagonal=diagonal) == expected
        assert session.grid.visited_count() == len(expected)


class TestVisitedSemantics:
    """Goal is found on selection, not on discovery."""

    @pytest.fixture
    def line(self) -> GridSession:
        return GridSession.from_ascii("S...G")

    @pytest.mark.parametrize("name,visited", [
        ("dijkstra", 4),
        ("astar", 4),
        ("greedy", 4),
        ("bfs", 5),
        ("dfs", 5),
    ])
    def test_visited_counts(self, line, name, visited):
        """Priority searches mark on expansion, BFS/DFS on discovery."""
        expanded = explore(name, line)
        assert expanded == [(0, 0), (0, 1), (0, 2), (0, 3)]
        assert line.grid.visited_count() == visited
        assert len(reconstruct_path(line.start, line.goal)) == 5

    @pytest.mark.parametrize("name", ["dijkstra", "astar", "greedy", "bfs", "dfs"])
    def test_start_is_goal(self, name):
        """Start equal to goal stops before expanding anything."""
        session = GridSession.from_ascii("S..\n...")
        start = session.start
        neighbors = partial(session.grid.neighbors, diagonal=False)
        expanded = list(get_algorithm(name).explore(session.grid, start, start, neighbors))
        assert expanded == []
        assert session.grid.visited_count() == 0
        assert reconstruct_path(start, start) == [start]


class TestOptimality:
    """Shortest-path guarantees on unit-cost grids."""

    @pytest.mark.parametrize("name", ["dijkstra", "astar", "bfs"])
    def test_open_grid_optimal(self, open_session, name):
        """Optimal algorithms find the 8-step route on an open 5x5."""
        explore(name, open_session)
        assert len(path_positions(open_session)) - 1 == 8

    @pytest.mark.parametrize("name", ["greedy", "dfs"])
    def test_open_grid_non_optimal(self, open_session, name):
        """Non-optimal algorithms still succeed, with at least 8 steps."""
        explore(name, open_session)
        assert len(path_positions(open_session)) - 1 >= 8

    @pytest.mark.parametrize("name", ["dijkstra", "astar", "bfs"])
    def test_corridor_optimal(self, corridor_session, name):
        """The winding maze has a 39-step shortest route."""
        explore(name, corridor_session)
        assert len(path_positions(corridor_session)) - 1 == 39

    @pytest.mark.parametrize("seed", range(10))
    def test_random_grids(self, seed):
        """BFS == Dijkstra == A* <= Greedy, DFS on random layouts."""
        session = GridSession(rows=12, cols=18, diagonal=False)
        session.set_start((0, 0))
        session.set_goal((11, 17))
        session.randomize_walls(0.25, seed=seed)

        lengths = {}
        for name in available_algorithms():
            explore(name, session)
            path = reconstruct_path(session.start, session.goal)
            lengths[name] = None if path is NO_PATH else len(path) - 1

        if lengths["bfs"] is None:
            assert set(lengths.values()) == {None}
            return
        assert lengths["bfs"] == lengths["dijkstra"] == lengths["astar"]
        assert lengths["astar"] <= lengths["greedy"]
        assert lengths["astar"] <= lengths["dfs"]

    def test_diagonal_shortcut(self):
        """With diagonals the 3x3 corner-to-corner route is 2 steps."""
        session = GridSession.from_ascii("S..\n...\n..G")
        for name in ("dijkstra", "bfs"):
            explore(name, session, diagonal=True)
            assert path_positions(session) == [(0, 0), (1, 1), (2, 2)]


class TestWallsAndFailure:
    """Walls are never entered; unreachable goals fail cleanly."""

    @pytest.mark.parametrize("diagonal", [False, True])
    @pytest.mark.parametrize("name", ["dijkstra", "astar", "greedy", "bfs", "dfs"])
    def test_walls_never_visited(self, corridor_session, name, diagonal):
        """No wall is visited or on the path."""
        explore(name, corridor_session, diagonal=diagonal)
        for cell in corridor_session.grid:
            if cell.is_wall:
                assert not cell.visited
        path = reconstruct_path(corridor_session.start, corridor_session.goal)
        assert path is not NO_PATH
        assert not any(cell.is_wall for cell in path)

    @pytest.mark.parametrize("diagonal", [False, True])
    @pytest.mark.parametrize("name", ["dijkstra", "astar", "greedy", "bfs", "dfs"])
    def test_partition_has_no_path(self, blocked_session, name, diagonal):
        """A full wall column separates start from goal."""
        explore(name, blocked_session, diagonal=diagonal)
        assert blocked_session.goal.predecessor is None
        assert reconstruct_path(blocked_session.start, blocked_session.goal) is NO_PATH

    @pytest.mark.parametrize("name", ["dijkstra", "astar", "greedy", "bfs", "dfs"])
    def test_enclosed_goal(self, enclosed_session, name):
        """Every reachable cell is expanded before giving up."""
        expanded = explore(name, enclosed_session, diagonal=True)
        reachable = sum(1 for cell in enclosed_session.grid if not cell.is_wall) - 1
        assert len(expanded) == reachable
        assert reconstruct_path(enclosed_session.start, enclosed_session.goal) is NO_PATH


class TestPreconditions:
    """Endpoint validation happens before any traversal work."""

    def test_missing_goal(self, open_session):
        """A None goal is rejected."""
        neighbors = open_session.grid.neighbors
        with pytest.raises(InvalidEndpointsError, match="goal"):
            Dijkstra().explore(open_session.grid, open_session.start, None, neighbors)

    def test_walled_start(self, open_session):
        """A walled start is rejected without touching scratch state."""
        grid = open_session.grid
        grid.cell(2, 2).visited = True
        open_session.start.is_wall = True
        with pytest.raises(InvalidEndpointsError, match="wall"):
            BreadthFirst().explore(grid, open_session.start, open_session.goal, grid.neighbors)
        assert grid.cell(2, 2).visited

    def test_foreign_endpoint(self, open_session):
        """Endpoints from another grid are rejected."""
        other = open_session.grid.clone()
        with pytest.raises(InvalidEndpointsError):
            AStar().explore(open_session.grid, other.cell(0, 0), open_session.goal, open_session.grid.neighbors)


class TestDeterminism:
    """Repeated runs on the same input are identical."""

    @pytest.mark.parametrize("diagonal", [False, True])
    @pytest.mark.parametrize("name", ["dijkstra", "astar", "greedy", "bfs", "dfs"])
    def test_repeat_runs(self, corridor_session, name, diagonal):
        """Same expansions, visited set and path every time."""
        runs = []
        for _ in range(3):
            expanded = explore(name, corridor_session, diagonal=diagonal)
            visited = {cell.position for cell in corridor_session.grid if cell.visited}
            predecessors = {
                cell.position: cell.predecessor.position
                for cell in corridor_session.grid
                if cell.predecessor is not None
            }
            runs.append((expanded, visited, predecessors, path_positions(corridor_session)))
        assert runs[0] == runs[1] == runs[2]
