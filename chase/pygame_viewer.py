# chase/pygame_viewer.py
from __future__ import annotations
import argparse
from dataclasses import dataclass
import pygame

from .types import NORTH, WEST, SOUTH, EAST
from .config import SimConfig, add_world_args, check_world_args
from .strategy import Strategy
from .world import World
from .viz import tile_color

LABEL_HEIGHT = 30

@dataclass
class Colors:
    BG = (255, 255, 255)
    LINE = (0, 0, 0)
    TEXT = (0, 0, 0)

MOVE_KEYS = {
    pygame.K_w: NORTH,
    pygame.K_a: WEST,
    pygame.K_s: SOUTH,
    pygame.K_d: EAST,
}

STRATEGY_KEYS = {
    pygame.K_b: Strategy.BFS,
    pygame.K_n: Strategy.DFS,
    pygame.K_m: Strategy.ASTAR,
}

class Viewer:
    def __init__(self, world: World, cell_size: int = 30, fps: int = 60):
        self.world = world
        self.cell = cell_size
        self.fps = fps

        W = world.grid.width * cell_size
        H = world.grid.height * cell_size + LABEL_HEIGHT
        self.screen = pygame.display.set_mode((W, H))
        pygame.display.set_caption("Grid Pursuit")
        self.font = pygame.font.SysFont(None, 22)
        self.clock = pygame.time.Clock()

    # ----------------- input -----------------
    def handle_key(self, key: int) -> None:
        world, monster = self.world, self.world.monster
        if key in MOVE_KEYS:
            world.move_player(MOVE_KEYS[key])
        elif key == pygame.K_c:
            world.show_explored = not world.show_explored
        elif key == pygame.K_x:
            world.show_path = not world.show_path
        elif key in STRATEGY_KEYS:
            monster.strategy = STRATEGY_KEYS[key]
            print(f"Search strategy set to: {monster.strategy.label}")
        elif key == pygame.K_p:
            monster.slower()
            print(f"Step interval: {monster.step_interval_ms:.0f} ms")
        elif key == pygame.K_o:
            monster.faster()
            print(f"Step interval: {monster.step_interval_ms:.0f} ms")
        elif key == pygame.K_r:
            world.remove_mode = not world.remove_mode
            print(f"Remove tiles mode: {'on' if world.remove_mode else 'off'}")
        elif key == pygame.K_u:
            monster.moving = not monster.moving
            print(f"Monster moving: {monster.moving}")

    def handle_click(self, pixel) -> None:
        x, y = pixel
        self.world.click_tile((y // self.cell, x // self.cell))

    # ----------------- draw -----------------
    def draw(self) -> None:
        grid, cell = self.world.grid, self.cell
        scr = self.screen
        scr.fill(Colors.BG)

        for r in range(grid.height):
            for c in range(grid.width):
                rect = pygame.Rect(c * cell, r * cell, cell, cell)
                scr.fill(tile_color(self.world, (r, c)), rect)
                pygame.draw.rect(scr, Colors.LINE, rect, 2)

        label = f"ALGORITHM: {self.world.monster.strategy.label}"
        if self.world.remove_mode:
            label += "   [REMOVE]"
        text = self.font.render(label, True, Colors.TEXT)
        scr.blit(text, (20, grid.height * cell + 8))

        pygame.display.flip()

    # ----------------- loop -----------------
    def run(self) -> None:
        running = True
        while running:
            dt_ms = self.clock.tick(self.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        self.handle_key(event.key)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self.handle_click(event.pos)

            self.world.update(dt_ms)
            self.draw()

def main():
    parser = argparse.ArgumentParser(description="Grid pursuit viewer")
    add_world_args(parser)
    parser.add_argument("--fps", type=int, default=None, help="Frames per second")
    args = parser.parse_args()
    check_world_args(parser, args)
    cfg = SimConfig.from_args(args)

    pygame.init()
    try:
        Viewer(World.create(cfg), cell_size=cfg.cell, fps=cfg.fps).run()
    finally:
        pygame.quit()

if __name__ == "__main__":
    main()
