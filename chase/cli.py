# chase/cli.py
from __future__ import annotations
import argparse, os, random, time
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .types import DIRECTIONS
from .config import SimConfig, add_world_args, check_world_args
from .strategy import Strategy
from .world import World
from .viz import draw_world_png

@dataclass
class RunStats:
    reached: bool
    steps: int
    explored: int
    elapsed_sec: float

def format_stats(name: str, s: RunStats) -> str:
    return (f"{name:8s} | reached={s.reached!s:5s} | steps={s.steps:4d} | "
            f"explored={s.explored:5d} | time={s.elapsed_sec*1000:7.2f} ms")

def run_strategy(world: World, strategy: Strategy) -> RunStats:
    """Plan once from the monster to the player with `strategy` and leave the plan on the monster."""
    monster = world.monster
    monster.strategy = strategy
    t0 = time.perf_counter()
    monster.replan(world.grid, world.player.pos, world.player.last_dir)
    elapsed = time.perf_counter() - t0
    reached = monster.path is not None
    return RunStats(reached, len(monster.path) if reached else 0, len(monster.explored), elapsed)

def run_all_algs(world: World, out_dir: Optional[str] = None, base_tag: str = "run",
                 cell: int = 30) -> List[Tuple[str, RunStats]]:
    results: List[Tuple[str, RunStats]] = []
    for strategy in Strategy:
        st = run_strategy(world, strategy)
        results.append((strategy.label, st))
        if out_dir:
            draw_world_png(world, os.path.join(out_dir, f"{base_tag}_{strategy.name.lower()}.png"), cell=cell)
    return results

def simulate(world: World, ticks: int, fps: int = 60, player_interval_ms: float = 400.0,
             seed: Optional[int] = None) -> Optional[int]:
    """
    Headless chase: the player random-walks, the monster pursues.
    Returns the tick on which the player was caught, or None.
    """
    rng = random.Random(seed)
    dt = 1000.0 / fps
    player_timer = 0.0
    for t in range(1, ticks + 1):
        player_timer += dt
        if player_timer >= player_interval_ms:
            world.move_player(rng.choice(DIRECTIONS))
            player_timer = 0.0
        world.update(dt)
        if world.caught:
            return t
    return None

# -------- subcommands --------

def cmd_demo(args: argparse.Namespace) -> None:
    cfg = SimConfig.from_args(args)
    world = World.create(cfg)
    tag = f"seed{cfg.seed}" if cfg.seed is not None else "demo"
    results = run_all_algs(world, out_dir=args.out, base_tag=tag, cell=cfg.cell)
    print(f"monster={world.monster.position} player={world.player.pos} obstacles={len(world.grid.obstacles)}")
    for name, st in results:
        print(format_stats(name, st))
    print("wrote PNGs to", args.out)

def cmd_bench(args: argparse.Namespace) -> None:
    base = SimConfig.from_args(args)
    first_seed = base.seed if base.seed is not None else 0
    totals = {s.label: [0, 0, 0.0] for s in Strategy}
    for i in range(args.count):
        base.seed = first_seed + i
        world = World.create(base)
        for name, st in run_all_algs(world):
            print(f"grid {base.seed:4d} :: {format_stats(name, st)}")
            tot = totals[name]
            tot[0] += st.steps
            tot[1] += st.explored
            tot[2] += st.elapsed_sec
    print("-" * 72)
    for name, (steps, explored, secs) in totals.items():
        print(f"{name:8s} | total steps={steps:6d} | total explored={explored:7d} | time={secs*1000:8.2f} ms")

def cmd_chase(args: argparse.Namespace) -> None:
    cfg = SimConfig.from_args(args)
    world = World.create(cfg)
    caught = simulate(world, args.ticks, fps=cfg.fps, player_interval_ms=args.player_interval, seed=cfg.seed)
    m = world.monster
    if caught is None:
        print(f"not caught after {args.ticks} ticks | monster={m.position} player={world.player.pos} | replans={m.replans}")
    else:
        print(f"caught at tick {caught} ({caught / cfg.fps:.1f} s) | replans={m.replans}")
    if args.png:
        draw_world_png(world, args.png, cell=cfg.cell)
        print("wrote", args.png)

def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Grid pursuit: BFS / DFS / A* chasing a moving target")
    sub = p.add_subparsers(dest="cmd", required=True)

    d = sub.add_parser("demo", help="plan with every strategy on one random world and save PNGs")
    add_world_args(d)
    d.add_argument("--out", type=str, default="runs")
    d.set_defaults(func=cmd_demo)

    b = sub.add_parser("bench", help="compare strategies over many seeded random worlds")
    add_world_args(b)
    b.add_argument("--count", type=int, default=30)
    b.set_defaults(func=cmd_bench)

    c = sub.add_parser("chase", help="run a headless chase against a random-walking player")
    add_world_args(c)
    c.add_argument("--ticks", type=int, default=3600)
    c.add_argument("--fps", type=int, default=None)
    c.add_argument("--player-interval", type=float, default=400.0,
                   help="ms between random player moves")
    c.add_argument("--png", type=str, default="", help="save the final frame here")
    c.set_defaults(func=cmd_chase)

    return p

def main(argv: Optional[List[str]] = None):
    ap = build_argparser()
    args = ap.parse_args(argv)
    check_world_args(ap, args)
    args.func(args)
