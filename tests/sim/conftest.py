"""Shared fixtures for simulation tests."""

from __future__ import annotations

import pytest

from maze_escape.sim.core.entities import ProgressionState
from maze_escape.sim.core.rng import GameRNG
from maze_escape.sim.core.scheduler import Scheduler


@pytest.fixture
def scheduler() -> Scheduler:
    return Scheduler()


@pytest.fixture
def rng() -> GameRNG:
    return GameRNG(seed=42)


@pytest.fixture
def player() -> ProgressionState:
    return ProgressionState(
        name="Hero", max_hp=100, current_hp=100, max_mp=50, current_mp=50,
        base_attack=15, base_defense=7,
    )
