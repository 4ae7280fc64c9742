# chase/types.py
from __future__ import annotations
from typing import Tuple

Position = Tuple[int, int]  # (row, col)

NORTH: Position = (-1, 0)
WEST: Position = (0, -1)
SOUTH: Position = (1, 0)
EAST: Position = (0, 1)
STILL: Position = (0, 0)

# adjacency order; search tie-breaking depends on it
DIRECTIONS = (NORTH, WEST, SOUTH, EAST)

def add(a: Position, b: Position) -> Position:
    return (a[0] + b[0], a[1] + b[1])

def scale(p: Position, k: int) -> Position:
    return (p[0] * k, p[1] * k)
