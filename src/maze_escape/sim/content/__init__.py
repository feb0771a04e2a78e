"""Static game content: enemy archetypes, the starting loadout, chest loot."""

from maze_escape.sim.content.archetypes import (
    ARCHETYPES,
    STARTER_INVENTORY,
    Encounter,
    new_player,
    spawn_enemy,
)
from maze_escape.sim.content.loot import KINDS, MATERIALS, roll_loot

__all__ = [
    "ARCHETYPES",
    "STARTER_INVENTORY",
    "Encounter",
    "new_player",
    "spawn_enemy",
    "KINDS",
    "MATERIALS",
    "roll_loot",
]
