"""Tunable constants for a run, gathered into one validated model.

The defaults are the stock game balance.  A JSON file with any subset of
the fields can be loaded with :func:`load_config`.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field

MIN_MAZE_SIZE = 5


class GameConfig(BaseModel):
    """Every fixed number the simulation depends on."""

    model_config = {"frozen": True}

    # -- maze ------------------------------------------------------------------
    maze_cols: int = Field(default=20, ge=MIN_MAZE_SIZE)
    maze_rows: int = Field(default=15, ge=MIN_MAZE_SIZE)
    braid_probability: float = Field(default=0.10, ge=0.0, le=1.0)

    # -- placement -------------------------------------------------------------
    monster_count: int = Field(default=5, ge=0)
    chest_count: int = Field(default=3, ge=0)
    placement_attempts: int = Field(default=100, ge=1)
    boss_min_offset: int = Field(default=5, ge=0)
    """The boss must satisfy ``x > offset or y > offset``."""

    # -- player ----------------------------------------------------------------
    starting_hp: int = Field(default=100, ge=1)
    starting_mp: int = Field(default=50, ge=0)
    base_attack: int = Field(default=15, ge=0)
    base_defense: int = Field(default=7, ge=0)
    inventory_capacity: int = Field(default=3, ge=0)

    # -- battle ----------------------------------------------------------------
    heal_mp_cost: int = Field(default=10, ge=0)
    heal_amount: int = Field(default=30, ge=0)

    # -- pacing (milliseconds of virtual time) ---------------------------------
    enemy_turn_delay_ms: int = Field(default=1000, ge=0)
    win_exit_delay_ms: int = Field(default=1500, ge=0)
    loss_exit_delay_ms: int = Field(default=2000, ge=0)
    full_warning_cooldown_ms: int = Field(default=1000, ge=0)


DEFAULT_CONFIG = GameConfig()


def load_config(path: Path | str) -> GameConfig:
    """Read a JSON object from *path* and validate it as a :class:`GameConfig`.

    Missing fields fall back to the defaults.
    """
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    return GameConfig.model_validate(raw)
