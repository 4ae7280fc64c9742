# chase/world.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .types import Position, STILL, add
from .grid import Grid
from .pursuit import PursuitController
from .config import SimConfig

@dataclass
class Player:
    pos: Position = (0, 0)
    last_dir: Position = STILL

class World:
    """
    Everything one chase scene needs: the grid, the player, the monster and
    the debug flags the viewer toggles.
    """

    def __init__(self, grid: Grid, player: Player, monster: PursuitController):
        self.grid = grid
        self.player = player
        self.monster = monster
        self.show_explored = True
        self.show_path = True
        self.remove_mode = False

    @staticmethod
    def create(cfg: Optional[SimConfig] = None) -> "World":
        cfg = cfg or SimConfig()
        grid = Grid.random(cfg.width, cfg.height, cfg.obstacles, seed=cfg.seed)
        monster = PursuitController((cfg.height // 2, cfg.width // 2),
                                    strategy=cfg.strategy,
                                    step_interval_ms=cfg.step_interval_ms,
                                    anticipation=cfg.anticipation)
        return World(grid, Player(), monster)

    def move_player(self, direction: Position) -> bool:
        """Move the player one tile; moves into occupied tiles are undone."""
        self.player.last_dir = direction
        nxt = add(self.player.pos, direction)
        if self.grid.is_occupied(nxt):
            return False
        self.player.pos = nxt
        return True

    def click_tile(self, tile: Position) -> None:
        """Add an obstacle (or remove one in remove mode) and force a re-plan."""
        if self.remove_mode:
            self.grid.remove_obstacle(tile)
        elif not self.grid.is_occupied(tile):
            self.grid.add_obstacle(tile)
        self.monster.invalidate()

    def update(self, dt_ms: float) -> bool:
        return self.monster.tick(dt_ms, self.grid, self.player.pos, self.player.last_dir)

    @property
    def caught(self) -> bool:
        return self.monster.position == self.player.pos
