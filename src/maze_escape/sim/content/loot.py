"""Chest loot table.

- Material: uniform over Bronze (8), Iron (12), Silver (18), Gold (25).
- Kind: uniform over Sword (weapon) and Armor (armor).
- Armor is worth 60% of the material value, rounded down.
"""

from __future__ import annotations

import math

from maze_escape.sim.core.entities import Item, ItemType
from maze_escape.sim.core.rng import GameRNG

MATERIALS: list[tuple[str, int]] = [
    ("Bronze", 8),
    ("Iron", 12),
    ("Silver", 18),
    ("Gold", 25),
]

KINDS: list[tuple[str, ItemType]] = [
    ("Sword", ItemType.WEAPON),
    ("Armor", ItemType.ARMOR),
]

ARMOR_VALUE_SCALE = 0.6


def roll_loot(rng: GameRNG) -> Item:
    """Roll a random piece of gear from the chest table."""
    material, value = rng.random_choice(MATERIALS)
    kind, item_type = rng.random_choice(KINDS)
    if item_type == ItemType.ARMOR:
        value = math.floor(value * ARMOR_VALUE_SCALE)
    return Item(name=f"{material} {kind}", value=value, item_type=item_type)
