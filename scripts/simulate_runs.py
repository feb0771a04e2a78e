#!/usr/bin/env python3
"""Play a batch of headless maze runs with the random agent and summarise them.

Usage:
    uv run python scripts/simulate_runs.py [--runs N] [--seed S] [--steps N]
    uv run python scripts/simulate_runs.py --config my_config.json --show-maze -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from maze_escape.sim.config import DEFAULT_CONFIG, load_config
from maze_escape.sim.core.rng import GameRNG
from maze_escape.sim.dungeon.level import Level
from maze_escape.sim.runner import BatchRunner


def main() -> None:
    parser = argparse.ArgumentParser(description="Simulate headless maze runs.")
    parser.add_argument("--runs", type=int, default=20, help="Number of runs (default: 20)")
    parser.add_argument("--seed", type=int, default=0, help="Base seed (default: 0)")
    parser.add_argument("--steps", type=int, default=2000, help="Agent decisions per run")
    parser.add_argument("--config", type=Path, default=None, help="JSON file of GameConfig overrides")
    parser.add_argument("--parallel", action="store_true", default=False, help="Use multiprocessing")
    parser.add_argument("--show-maze", action="store_true", default=False, help="Print the first seed's level 1")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config) if args.config else DEFAULT_CONFIG

    if args.show_maze:
        level = Level.generate(1, GameRNG(args.seed), config)
        print(level.render())
        print()

    runner = BatchRunner(config=config)
    results = runner.run_batch(
        args.runs, base_seed=args.seed, max_steps=args.steps, parallel=args.parallel,
    )

    battles = [b for r in results for b in r.battles]
    wins = sum(1 for b in battles if b.result == "win")
    print(f"Runs: {len(results)}  (seeds {args.seed}..{args.seed + args.runs - 1})")
    print(f"  Battles fought: {len(battles)}  won: {wins}")
    print(f"  Levels cleared: {sum(r.levels_cleared for r in results)}")
    print(f"  Deaths: {sum(r.deaths for r in results)}")
    print(f"  Items collected: {sum(len(r.items_collected) for r in results)}")
    print(f"  Highest level: {max((r.final_level for r in results), default=0)}")


if __name__ == "__main__":
    main()
