"""Tests for the three search strategies.

Tests cover:
  - BFS and A* return shortest paths (checked against a distance wavefront)
  - DFS returns valid but possibly longer paths
  - start == target, unreachable and off-grid targets
  - determinism and obstacle add/remove round trips
"""

from __future__ import annotations

from typing import Dict, Optional, Set

import pytest

from chase.astar import astar
from chase.grid import Grid
from chase.search import SearchResult, bfs, dfs
from chase.strategy import Strategy
from chase.types import Position

SEARCHES = [bfs, dfs, astar]

WALLED = Grid.from_rows([
    "..#..",
    "..#..",
    "..#..",
])


def _distances(start: Position, grid: Grid) -> Dict[Position, int]:
    dist = {start: 0}
    layer = [start]
    while layer:
        nxt = []
        for p in layer:
            for q in grid.adjacent(p):
                if q not in dist:
                    dist[q] = dist[p] + 1
                    nxt.append(q)
        layer = nxt
    return dist


def _shortest(start: Position, target: Position, grid: Grid) -> Optional[int]:
    return _distances(start, grid).get(target)


def _component(start: Position, grid: Grid) -> Set[Position]:
    return set(_distances(start, grid))


def _is_valid(path, start, target, grid) -> bool:
    if path[0] != start or path[-1] != target:
        return False
    for a, b in zip(path, path[1:]):
        if grid.is_occupied(b) or abs(a[0] - b[0]) + abs(a[1] - b[1]) != 1:
            return False
    return True


def test_bfs_open_grid_example():
    res = bfs((0, 0), (2, 2), Grid(3, 3))
    assert res.path == [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)]


def test_astar_open_grid_example_length():
    res = astar((0, 0), (2, 2), Grid(3, 3))
    assert len(res.path) == 5
    assert _is_valid(res.path, (0, 0), (2, 2), Grid(3, 3))


def test_dfs_follows_adjacency_order():
    # south before east, so DFS sweeps round the grid before reaching (0, 1)
    res = dfs((0, 0), (0, 1), Grid(3, 3))
    assert res.path == [(0, 0), (1, 0), (2, 0), (2, 1), (1, 1), (0, 1)]
    assert len(bfs((0, 0), (0, 1), Grid(3, 3)).path) == 2


@pytest.mark.parametrize("seed", range(25))
def test_strategies_on_random_grids(seed):
    grid = Grid.random(12, 9, 35, seed=seed)
    free = grid.free_cells()
    start, target = free[0], free[-1]
    best = _shortest(start, target, grid)

    b, a, d = bfs(start, target, grid), astar(start, target, grid), dfs(start, target, grid)
    if best is None:
        comp = _component(start, grid)
        for res in (b, a, d):
            assert res.path is None
            assert res.explored == comp
        return

    assert len(b.path) - 1 == best
    assert len(a.path) == len(b.path)
    assert len(d.path) >= len(b.path)
    for res in (b, a, d):
        assert _is_valid(res.path, start, target, grid)


@pytest.mark.parametrize("search", SEARCHES)
def test_start_equals_target(search):
    res = search((1, 1), (1, 1), Grid(3, 3))
    assert res.path == [(1, 1)]
    assert res.explored <= {(1, 1)}


@pytest.mark.parametrize("search", SEARCHES)
def test_unreachable_explores_component(search):
    res = search((0, 0), (0, 4), WALLED)
    assert res.path is None
    assert not res.found
    assert res.explored == {(r, c) for r in range(3) for c in range(2)}


@pytest.mark.parametrize("search", SEARCHES)
@pytest.mark.parametrize("target", [(0, 9), (-1, 0), (0, 2)])
def test_target_off_grid_or_on_obstacle(search, target):
    res = search((0, 0), target, WALLED)
    assert res.path is None
    assert res.explored == _component((0, 0), WALLED)


@pytest.mark.parametrize("search", SEARCHES)
def test_deterministic(search):
    grid = Grid.random(15, 10, 40, seed=3)
    free = grid.free_cells()
    first = search(free[0], free[-1], grid)
    again = search(free[0], free[-1], grid)
    assert first.path == again.path
    assert first.explored == again.explored


@pytest.mark.parametrize("search", SEARCHES)
def test_obstacle_round_trip(search):
    grid = Grid(5, 5)
    before = search((0, 0), (4, 4), grid)
    grid.add_obstacle((1, 0))
    grid.add_obstacle((0, 1))
    assert search((0, 0), (4, 4), grid).path is None
    grid.remove_obstacle((1, 0))
    grid.remove_obstacle((0, 1))
    after = search((0, 0), (4, 4), grid)
    assert after.path == before.path
    assert after.explored == before.explored


def test_astar_explores_less_than_bfs_on_open_row():
    grid = Grid(11, 11)
    a = astar((5, 0), (5, 10), grid)
    b = bfs((5, 0), (5, 10), grid)
    assert a.path == [(5, c) for c in range(11)]
    assert len(a.explored) < len(b.explored)


def test_result_unpacks():
    path, explored = bfs((0, 0), (0, 1), Grid(2, 1))
    assert path == [(0, 0), (0, 1)]
    assert isinstance(explored, set)
    assert isinstance(bfs((0, 0), (0, 0), Grid(1, 1)), SearchResult)


class TestStrategy:
    def test_labels(self):
        assert [s.label for s in Strategy] == ["BFS", "DFS", "A-STAR"]

    def test_dispatch(self):
        grid = Grid(3, 3)
        assert Strategy.BFS.search((0, 0), (2, 2), grid).path == bfs((0, 0), (2, 2), grid).path
        assert Strategy.DFS.search((0, 0), (0, 1), grid).path == dfs((0, 0), (0, 1), grid).path
        assert Strategy.ASTAR.search((0, 0), (2, 2), grid).path == astar((0, 0), (2, 2), grid).path

    @pytest.mark.parametrize("name,expected", [
        ("bfs", Strategy.BFS), ("DFS", Strategy.DFS),
        ("astar", Strategy.ASTAR), ("a-star", Strategy.ASTAR),
    ])
    def test_parse(self, name, expected):
        assert Strategy.parse(name) is expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            Strategy.parse("dijkstra")
