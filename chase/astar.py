# chase/astar.py
from __future__ import annotations
from typing import Dict, List, Set, Tuple
import heapq
from .types import Position
from .grid import Grid
from .heuristics import manhattan
from .search import SearchResult

def astar(start: Position, target: Position, grid: Grid) -> SearchResult:
    """
    Best-first search ordered by g + Manhattan distance to the target, i.e.
    plain A*. Ordering by the heuristic alone often explores fewer cells but can
    return longer paths around concave obstacles.
    Equal keys pop in insertion order, which keeps the result deterministic
    under the grid's fixed adjacency order. Unit step costs and a consistent
    heuristic make the returned path as short as the BFS one.
    """
    openh: List[Tuple[int, int, Position]] = []
    g: Dict[Position, int] = {start: 0}
    parent: Dict[Position, Position] = {}
    closed: Set[Position] = set()
    counter = 0

    heapq.heappush(openh, (manhattan(start, target), counter, start))
    counter += 1

    while openh:
        _, _, s = heapq.heappop(openh)
        if s in closed:
            continue
        closed.add(s)

        if s == target:
            path = [s]
            while s in parent:
                s = parent[s]
                path.append(s)
            path.reverse()
            return SearchResult(path, closed)

        for nb in grid.adjacent(s):
            if nb in closed:
                continue
            tentative = g[s] + 1
            if nb not in g or tentative < g[nb]:
                g[nb] = tentative
                parent[nb] = s
                heapq.heappush(openh, (tentative + manhattan(nb, target), counter, nb))
                counter += 1

    return SearchResult(None, closed)
