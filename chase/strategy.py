# chase/strategy.py
from __future__ import annotations
from enum import Enum
from .types import Position
from .grid import Grid
from .search import SearchResult, bfs, dfs
from .astar import astar

class Strategy(Enum):
    BFS = "BFS"
    DFS = "DFS"
    ASTAR = "A-STAR"

    @property
    def label(self) -> str:
        return self.value

    def search(self, start: Position, target: Position, grid: Grid) -> SearchResult:
        return _SEARCHERS[self](start, target, grid)

    @staticmethod
    def parse(name: str) -> "Strategy":
        """Accepts member names or labels, case-insensitively ('astar', 'A-STAR')."""
        key = name.strip().upper()
        for s in Strategy:
            if key in (s.name, s.value):
                return s
        raise ValueError(f"unknown search strategy: {name!r}")

_SEARCHERS = {
    Strategy.BFS: bfs,
    Strategy.DFS: dfs,
    Strategy.ASTAR: astar,
}
