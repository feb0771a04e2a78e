"""Top-level mutable state for a maze run."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from maze_escape.sim.core.entities import ProgressionState


class GameState(BaseModel):
    """State that survives level regeneration but not a loss."""

    model_config = {"arbitrary_types_allowed": True}

    player: ProgressionState
    level: int = Field(default=1, ge=1)
    attempt: int = Field(default=1, ge=1)
    """Which try this is; bumped every time a loss restarts the run."""

    rng: Any = Field(default=None, exclude=True)
    """Master ``GameRNG`` for the run.  Excluded from serialization."""
