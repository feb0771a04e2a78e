"""Dungeon module -- maze generation, entity placement, levels and run management."""

from maze_escape.sim.dungeon.level import Contact, Direction, Level
from maze_escape.sim.dungeon.maze_gen import GridPosition, Maze, MazeGenerator, Tile
from maze_escape.sim.dungeon.placement import (
    EntityKind,
    EntityPlacer,
    PlacementRecord,
    Placements,
    place_entities,
)
from maze_escape.sim.dungeon.run_manager import Mode, RunManager, Transition

__all__ = [
    "Contact",
    "Direction",
    "Level",
    "GridPosition",
    "Maze",
    "MazeGenerator",
    "Tile",
    "EntityKind",
    "EntityPlacer",
    "PlacementRecord",
    "Placements",
    "place_entities",
    "Mode",
    "RunManager",
    "Transition",
]
