"""Enemy archetypes and the starting loadout.

Archetypes are templates: :func:`spawn_enemy` hands out a fresh
:class:`EnemyStats` per encounter so that damage dealt in one battle never
leaks into the next.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from maze_escape.sim.config import DEFAULT_CONFIG, GameConfig
from maze_escape.sim.core.entities import (
    EnemyStats,
    Equipment,
    Item,
    ItemType,
    ProgressionState,
)


class Encounter(str, Enum):
    """What the player bumped into."""

    MONSTER = "monster"
    BOSS = "boss"


ARCHETYPES: dict[Encounter, dict[str, Any]] = {
    Encounter.MONSTER: {
        "name": "Monster", "hp": 50, "attack": 15, "defense": 5, "visual_tag": "red",
    },
    Encounter.BOSS: {
        "name": "Boss", "hp": 150, "attack": 25, "defense": 12, "visual_tag": "purple",
    },
}

STARTER_INVENTORY: tuple[Item, ...] = (
    Item(name="Basic Sword", value=5, item_type=ItemType.WEAPON),
    Item(name="Basic Armor", value=3, item_type=ItemType.ARMOR),
)


def spawn_enemy(encounter: Encounter | str) -> EnemyStats:
    """Build a new enemy from the archetype table."""
    data = ARCHETYPES[Encounter(encounter)]
    return EnemyStats(
        name=data["name"],
        archetype=Encounter(encounter).value,
        max_hp=data["hp"],
        current_hp=data["hp"],
        attack=data["attack"],
        defense=data["defense"],
        visual_tag=data["visual_tag"],
    )


def new_player(config: GameConfig = DEFAULT_CONFIG) -> ProgressionState:
    """Create the default progression state for a fresh run."""
    return ProgressionState(
        name="Hero",
        max_hp=config.starting_hp,
        current_hp=config.starting_hp,
        max_mp=config.starting_mp,
        current_mp=config.starting_mp,
        base_attack=config.base_attack,
        base_defense=config.base_defense,
        equipment=Equipment(),
        inventory=list(STARTER_INVENTORY),
    )
