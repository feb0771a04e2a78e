"""Headless run driver -- ties a :class:`RunManager` to a play agent.

Provides:

- **simulate_run**: plays one seeded run for a bounded number of steps.
- **BatchRunner**: plays many seeds, optionally in parallel.
"""

from __future__ import annotations

import logging
import multiprocessing

from maze_escape.sim.config import GameConfig
from maze_escape.sim.core.rng import GameRNG
from maze_escape.sim.dungeon.run_manager import Mode, RunManager
from maze_escape.sim.play_agents.base import PlayAgent
from maze_escape.sim.play_agents.random_agent import RandomAgent
from maze_escape.sim.telemetry import RunTelemetry

logger = logging.getLogger(__name__)

_DEFAULT_MAX_STEPS = 2000
_STEP_MS = 100
"""Virtual time that passes with every exploration step."""


def simulate_run(
    seed: int,
    agent_class: type[PlayAgent] = RandomAgent,
    max_steps: int = _DEFAULT_MAX_STEPS,
    config: GameConfig | None = None,
) -> RunTelemetry:
    """Play one run and return its telemetry.

    The agent gets ``max_steps`` decisions; battle timers are drained
    between battle decisions so every action resolves fully before the
    next one is chosen.
    """
    rng = GameRNG(seed)
    manager = RunManager(rng.fork("run"), config)
    agent = agent_class(rng=rng.fork("agent"))  # type: ignore[call-arg]
    manager.start()

    for _ in range(max_steps):
        manager.telemetry.steps += 1

        if manager.mode == Mode.BATTLE:
            battle = manager.battle
            if battle is not None and battle.accepts_input:
                action = agent.choose_battle_action(battle)
                acted = manager.cast_heal() if action == "heal" else manager.attack()
                if not acted:
                    manager.attack()
            manager.scheduler.run_until_idle()
            continue

        if manager.mode == Mode.INVENTORY:
            manager.close_inventory()
            continue

        if agent.wants_inventory(manager.player):
            manager.open_inventory()
            agent.manage_inventory(manager.inventory)
            manager.close_inventory()

        direction = agent.choose_move(manager.level, manager.player)
        if direction is not None:
            manager.move(direction)
        manager.tick(_STEP_MS)

    telemetry = manager.telemetry
    telemetry.final_level = manager.level_number
    logger.debug(
        "Seed %d: level %d, %d battles, %d deaths",
        seed, telemetry.final_level, len(telemetry.battles), telemetry.deaths,
    )
    return telemetry


def _worker_run_single(args: tuple) -> RunTelemetry:
    seed, agent_class, max_steps, config = args
    return simulate_run(seed, agent_class, max_steps, config)


class BatchRunner:
    """Runs many seeded runs, optionally in parallel."""

    def __init__(
        self,
        agent_class: type[PlayAgent] = RandomAgent,
        config: GameConfig | None = None,
    ) -> None:
        self.agent_class = agent_class
        self.config = config

    def run_batch(
        self,
        n_runs: int,
        base_seed: int = 42,
        max_steps: int = _DEFAULT_MAX_STEPS,
        parallel: bool = False,
    ) -> list[RunTelemetry]:
        seeds = [base_seed + i for i in range(n_runs)]
        if parallel and n_runs > 1:
            return self._run_parallel(seeds, max_steps)
        return [
            simulate_run(seed, self.agent_class, max_steps, self.config)
            for seed in seeds
        ]

    def _run_parallel(self, seeds: list[int], max_steps: int) -> list[RunTelemetry]:
        work_items = [
            (seed, self.agent_class, max_steps, self.config) for seed in seeds
        ]
        n_workers = min(len(seeds), multiprocessing.cpu_count() or 1)
        with multiprocessing.Pool(processes=n_workers) as pool:
            return pool.map(_worker_run_single, work_items)
