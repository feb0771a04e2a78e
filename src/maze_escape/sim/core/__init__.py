"""Core simulation primitives for the maze crawler."""

from maze_escape.sim.core.entities import (
    Entity,
    EnemyStats,
    Equipment,
    Item,
    ItemType,
    ProgressionState,
)
from maze_escape.sim.core.game_state import GameState
from maze_escape.sim.core.rng import GameRNG
from maze_escape.sim.core.scheduler import Scheduler, TimerHandle

__all__ = [
    # rng
    "GameRNG",
    # entities
    "Entity",
    "EnemyStats",
    "Equipment",
    "Item",
    "ItemType",
    "ProgressionState",
    # game_state
    "GameState",
    # scheduler
    "Scheduler",
    "TimerHandle",
]
