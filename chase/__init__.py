# chase/__init__.py
from .types import Position, NORTH, WEST, SOUTH, EAST, STILL, DIRECTIONS
from .grid import Grid
from .heuristics import manhattan
from .search import SearchResult, bfs, dfs
from .astar import astar
from .strategy import Strategy
from .pursuit import PursuitController, anticipate, choose_target
from .config import SimConfig
from .world import World, Player

__all__ = [
    "Position", "NORTH", "WEST", "SOUTH", "EAST", "STILL", "DIRECTIONS",
    "Grid", "manhattan",
    "SearchResult", "bfs", "dfs", "astar", "Strategy",
    "PursuitController", "anticipate", "choose_target",
    "SimConfig", "World", "Player",
]
