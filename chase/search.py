# chase/search.py
from __future__ import annotations
from collections import deque
from typing import Deque, Iterator, List, Optional, Set, Tuple
from .types import Position
from .grid import Grid

class SearchResult:
    """
    Outcome of one search call.
    `path` runs start..target inclusive, or is None when the target is unreachable.
    `explored` holds every cell the search visited on this call.
    """
    def __init__(self, path: Optional[List[Position]], explored: Set[Position]):
        self.path = path
        self.explored = explored

    @property
    def found(self) -> bool:
        return self.path is not None

    def __iter__(self):
        # allows `path, explored = bfs(...)`
        return iter((self.path, self.explored))

    def __repr__(self) -> str:
        return f"SearchResult(path={self.path!r}, explored={len(self.explored)} cells)"

def bfs(start: Position, target: Position, grid: Grid) -> SearchResult:
    explored: Set[Position] = {start}
    frontier: Deque[List[Position]] = deque([[start]])

    while frontier:
        path = frontier.popleft()
        cur = path[-1]
        if cur == target:
            return SearchResult(path, explored)

        for nb in grid.adjacent(cur):
            if nb in explored:
                continue
            explored.add(nb)
            frontier.append(path + [nb])

    return SearchResult(None, explored)

def dfs(start: Position, target: Position, grid: Grid) -> SearchResult:
    """
    Depth-first search with an explicit stack.
    Neighbors are tried in adjacency order and the first branch that reaches
    the target wins, so the path is valid but usually not the shortest.
    """
    explored: Set[Position] = set()
    if start == target:
        return SearchResult([start], explored)

    explored.add(start)
    stack: List[Tuple[Position, Iterator[Position]]] = [(start, iter(grid.adjacent(start)))]

    while stack:
        _, todo = stack[-1]
        for nb in todo:
            if nb in explored:
                continue
            if nb == target:
                return SearchResult([s for s, _ in stack] + [nb], explored)
            explored.add(nb)
            stack.append((nb, iter(grid.adjacent(nb))))
            break
        else:
            stack.pop()

    return SearchResult(None, explored)
