# chase/pursuit.py
from __future__ import annotations
from typing import List, Optional, Set

from .types import Position, STILL, add, scale
from .grid import Grid
from .heuristics import manhattan
from .strategy import Strategy

def anticipate(opponent: Position, direction: Position, factor: int, grid: Grid) -> Position:
    """Project the opponent `factor` steps along its last move; fall back to where it stands."""
    ahead = add(opponent, scale(direction, factor))
    if grid.is_occupied(ahead):
        return opponent
    return ahead

def choose_target(me: Position, opponent: Position, anticipated: Position) -> Position:
    # ambush only when the projected cell is strictly closer than the opponent
    if manhattan(me, opponent) <= manhattan(me, anticipated):
        return opponent
    return anticipated

class PursuitController:
    """
    Chases an opponent across a Grid.

    The controller re-plans whenever the opponent has moved since the last
    plan, aiming either at the opponent or at the cell it is heading for,
    and walks the resulting path one tile every `step_interval_ms`.
    `path` is None when the last search found no route; the controller then
    holds position until the opponent moves or `invalidate()` is called.
    """

    def __init__(self, position: Position, strategy: Strategy = Strategy.ASTAR,
                 step_interval_ms: float = 250.0, anticipation: int = 0,
                 moving: bool = True):
        self.position = position
        self.strategy = strategy
        self.step_interval_ms = step_interval_ms
        self.anticipation = anticipation
        self.moving = moving

        self.last_known_opponent: Optional[Position] = None
        self.target: Optional[Position] = None
        self.path: Optional[List[Position]] = []
        self.explored: Set[Position] = set()
        self.elapsed_ms = 0.0
        self.replans = 0

    # ----------------- control surface -----------------
    def invalidate(self) -> None:
        """Forget the opponent's last position so the next step re-plans."""
        self.last_known_opponent = None

    def slower(self, delta_ms: float = 100.0) -> None:
        self.step_interval_ms += delta_ms

    def faster(self, delta_ms: float = 100.0) -> None:
        self.step_interval_ms = max(0.0, self.step_interval_ms - delta_ms)

    # ----------------- planning -----------------
    def needs_replan(self, opponent: Position) -> bool:
        return opponent != self.last_known_opponent

    def replan(self, grid: Grid, opponent: Position, direction: Position = STILL) -> None:
        self.last_known_opponent = opponent

        anticipated = anticipate(opponent, direction, self.anticipation, grid)
        self.target = choose_target(self.position, opponent, anticipated)

        res = self.strategy.search(self.position, self.target, grid)
        self.explored = res.explored
        self.path = res.path[1:] if res.path is not None else None
        self.replans += 1

    def step(self) -> bool:
        """Advance one tile along the current path. Returns True if the controller moved."""
        if not self.moving or not self.path:
            return False
        self.position = self.path.pop(0)
        return True

    def tick(self, dt_ms: float, grid: Grid, opponent: Position,
             direction: Position = STILL) -> bool:
        self.elapsed_ms += dt_ms
        if self.elapsed_ms < self.step_interval_ms:
            return False

        if self.needs_replan(opponent):
            self.replan(grid, opponent, direction)
        moved = self.step()
        self.elapsed_ms = 0.0
        return moved

    def __repr__(self) -> str:
        steps = "no path" if self.path is None else f"{len(self.path)} steps"
        return f"PursuitController(at={self.position}, {self.strategy.label}, {steps})"
