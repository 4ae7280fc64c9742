# chase/config.py
from __future__ import annotations
import argparse
from dataclasses import dataclass, fields
from typing import Optional

from .strategy import Strategy

@dataclass
class SimConfig:
    width: int = 20            # tiles
    height: int = 13           # tiles
    cell: int = 30             # pixels per tile
    obstacles: int = 14
    seed: Optional[int] = None
    step_interval_ms: float = 250.0
    anticipation: int = 0
    strategy: Strategy = Strategy.ASTAR
    fps: int = 60

    @staticmethod
    def from_args(args: argparse.Namespace) -> "SimConfig":
        """Pick up every matching attribute from an argparse namespace; the rest keep defaults."""
        kw = {}
        for f in fields(SimConfig):
            val = getattr(args, f.name, None)
            if val is None:
                continue
            if f.name == "strategy" and isinstance(val, str):
                val = Strategy.parse(val)
            kw[f.name] = val
        return SimConfig(**kw)

def add_world_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--width", type=int, default=None, help="Grid width in tiles")
    p.add_argument("--height", type=int, default=None, help="Grid height in tiles")
    p.add_argument("--obstacles", type=int, default=None, help="Number of random obstacles")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell", type=int, default=None, help="Cell size in pixels")
    p.add_argument("--step", dest="step_interval_ms", type=float, default=None,
                   help="Monster step interval in ms")
    p.add_argument("--anticipation", type=int, default=None,
                   help="Tiles to lead the player along its last move")
    p.add_argument("--strategy", type=str, default=None, choices=["bfs", "dfs", "astar"],
                   help="Initial search strategy")

def check_world_args(p: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    for name in ("width", "height", "cell", "fps"):
        val = getattr(args, name, None)
        if val is not None and val < 1:
            p.error(f"--{name} must be at least 1")
    for name in ("obstacles", "anticipation", "step_interval_ms"):
        val = getattr(args, name, None)
        if val is not None and val < 0:
            p.error(f"--{name.split('_')[0]} must not be negative")
