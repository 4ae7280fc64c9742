# chase/viz.py
from __future__ import annotations
import os
from typing import Tuple
from PIL import Image, ImageDraw

from .types import Position
from .world import World

Color = Tuple[int, int, int]

OBSTACLE: Color = (170, 170, 170)
MONSTER: Color = (255, 0, 0)
PLAYER: Color = (0, 0, 255)
PATH: Color = (255, 170, 0)
EXPLORED: Color = (0, 170, 255)
GROUND: Color = (0, 255, 0)
LINE: Color = (0, 0, 0)
TEXT: Color = (0, 0, 0)

LABEL_HEIGHT = 20

def tile_color(world: World, pos: Position) -> Color:
    """Colour of one tile; earlier layers win."""
    monster = world.monster
    if world.grid.is_occupied(pos):
        return OBSTACLE
    if pos == monster.position:
        return MONSTER
    if pos == world.player.pos:
        return PLAYER
    if world.show_path and monster.path and pos in monster.path:
        return PATH
    if world.show_explored and pos in monster.explored:
        return EXPLORED
    return GROUND

def render(world: World, cell: int = 30) -> Image.Image:
    grid = world.grid
    W, H = grid.width * cell, grid.height * cell
    img = Image.new("RGB", (W, H + LABEL_HEIGHT), (255, 255, 255))
    drw = ImageDraw.Draw(img)

    for r in range(grid.height):
        for c in range(grid.width):
            x0, y0 = c * cell, r * cell
            drw.rectangle((x0, y0, x0 + cell, y0 + cell), fill=tile_color(world, (r, c)), outline=LINE, width=2)

    drw.text((4, H + 4), f"ALGORITHM: {world.monster.strategy.label}", fill=TEXT)
    return img

def draw_world_png(world: World, out_png: str, cell: int = 30) -> None:
    img = render(world, cell)
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    img.save(out_png)
