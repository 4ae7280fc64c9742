# chase/grid.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set
import random

from .types import Position, DIRECTIONS, add

@dataclass
class Grid:
    width: int   # columns
    height: int  # rows
    obstacles: Set[Position] = field(default_factory=set)

    @staticmethod
    def random(width: int = 20, height: int = 13, count: int = 14,
               seed: Optional[int] = None) -> "Grid":
        """
        Scatter `count` obstacles uniformly over the grid.
        Repeated draws collapse into one obstacle, so fewer may end up placed.
        """
        rng = random.Random(seed)
        obstacles = {(rng.randrange(height), rng.randrange(width)) for _ in range(count)}
        return Grid(width, height, obstacles)

    @staticmethod
    def from_rows(rows: Iterable[str]) -> "Grid":
        """Build a grid from text rows, '#' marking an obstacle."""
        lines = [line for line in rows if line]
        obstacles = {(r, c) for r, line in enumerate(lines) for c, ch in enumerate(line) if ch == "#"}
        return Grid(len(lines[0]) if lines else 0, len(lines), obstacles)

    def in_bounds(self, p: Position) -> bool:
        r, c = p
        return 0 <= r < self.height and 0 <= c < self.width

    def is_occupied(self, p: Position) -> bool:
        return not self.in_bounds(p) or p in self.obstacles

    def adjacent(self, p: Position) -> List[Position]:
        return [q for q in (add(p, d) for d in DIRECTIONS) if not self.is_occupied(q)]

    def add_obstacle(self, p: Position) -> None:
        self.obstacles.add(p)

    def remove_obstacle(self, p: Position) -> None:
        self.obstacles.discard(p)

    def free_cells(self) -> List[Position]:
        return [(r, c) for r in range(self.height) for c in range(self.width)
                if (r, c) not in self.obstacles]
