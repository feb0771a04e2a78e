"""Core game mechanics for the maze crawler.

Re-exports the primary functions from each mechanics module for convenience.

Usage::

    from maze_escape.sim.mechanics import (
        calculate_damage, deal_damage,
        spend_mp, cast_heal,
        equip_item, discard_item, add_item, InventoryManager,
    )
"""

# -- damage ------------------------------------------------------------------
from .damage import calculate_damage, deal_damage, enemy_hits_player, player_hits_enemy

# -- magic -------------------------------------------------------------------
from .magic import cast_heal, spend_mp

# -- inventory ---------------------------------------------------------------
from .inventory import (
    InventoryManager,
    PickupOutcome,
    PickupResult,
    add_item,
    discard_item,
    equip_item,
    unequip_item,
)

__all__ = [
    # damage
    "calculate_damage",
    "deal_damage",
    "player_hits_enemy",
    "enemy_hits_player",
    # magic
    "spend_mp",
    "cast_heal",
    # inventory
    "InventoryManager",
    "PickupOutcome",
    "PickupResult",
    "add_item",
    "discard_item",
    "equip_item",
    "unequip_item",
]
