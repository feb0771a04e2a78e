"""Inventory and equipment -- equip, discard, and chest pickup.

Inventory operations are index-addressed into the player's ordered
inventory.  An out-of-range index returns ``False`` and changes nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Hashable

from maze_escape.sim.content.loot import roll_loot
from maze_escape.sim.core.entities import Item, ItemType, ProgressionState

if TYPE_CHECKING:
    from maze_escape.sim.core.rng import GameRNG

logger = logging.getLogger(__name__)

INVENTORY_FULL_MESSAGE = "Inventory Full!"


# ---------------------------------------------------------------------------
# Plain functions over ProgressionState
# ---------------------------------------------------------------------------

def _valid_index(player: ProgressionState, index: int) -> bool:
    return 0 <= index < len(player.inventory)


def equip_item(player: ProgressionState, index: int) -> bool:
    """Equip ``inventory[index]`` into its slot.

    If the slot held an item, the two swap places: the old item takes the
    vacated inventory index.  Otherwise the item leaves the inventory and
    later items shift left.
    """
    if not _valid_index(player, index):
        return False

    item = player.inventory[index]
    previous = player.equipment.slot_for(item.item_type)
    player.equipment.set_slot(item.item_type, item)

    if previous is not None:
        player.inventory[index] = previous
    else:
        player.inventory.pop(index)

    logger.debug("Equipped %s (replaced %s)", item.name, previous.name if previous else None)
    return True


def discard_item(player: ProgressionState, index: int) -> bool:
    """Throw away ``inventory[index]``.  Equipped items are never touched."""
    if not _valid_index(player, index):
        return False
    item = player.inventory.pop(index)
    logger.debug("Discarded %s", item.name)
    return True


def add_item(player: ProgressionState, item: Item, capacity: int) -> bool:
    """Append *item* unless the inventory already holds *capacity* items."""
    if len(player.inventory) >= capacity:
        return False
    player.inventory.append(item)
    return True


def unequip_item(player: ProgressionState, item_type: ItemType, capacity: int) -> bool:
    """Move the item in *item_type*'s slot back to the end of the inventory.

    Refused when the slot is empty or the inventory is full.
    """
    item = player.equipment.slot_for(item_type)
    if item is None or not add_item(player, item, capacity):
        return False
    player.equipment.set_slot(item_type, None)
    return True


# ---------------------------------------------------------------------------
# InventoryManager
# ---------------------------------------------------------------------------

class PickupResult(str, Enum):
    ADDED = "added"
    FULL = "full"
    """Inventory full; the player should be told."""

    FULL_SILENCED = "full_silenced"
    """Inventory full, but the warning for this spot is still cooling down."""


@dataclass
class PickupOutcome:
    result: PickupResult
    item: Item | None = None
    message: str | None = None

    @property
    def added(self) -> bool:
        return self.result == PickupResult.ADDED


class InventoryManager:
    """Owns inventory rules for one player.

    Parameters
    ----------
    player:
        Shared progression state; every operation mutates it in place.
    capacity:
        Maximum number of free-floating inventory items.
    warning_cooldown_ms:
        Minimum time between two "inventory full" signals for the same
        pickup spot.
    """

    def __init__(
        self,
        player: ProgressionState,
        capacity: int = 3,
        warning_cooldown_ms: int = 1000,
    ) -> None:
        self.player = player
        self.capacity = capacity
        self.warning_cooldown_ms = warning_cooldown_ms
        self._last_warning_ms: dict[Hashable, int] = {}

    @property
    def is_full(self) -> bool:
        return len(self.player.inventory) >= self.capacity

    def equip(self, index: int) -> bool:
        return equip_item(self.player, index)

    def discard(self, index: int) -> bool:
        return discard_item(self.player, index)

    def unequip(self, item_type: ItemType) -> bool:
        return unequip_item(self.player, item_type, self.capacity)

    def pickup(self, spot: Hashable, now_ms: int, rng: GameRNG) -> PickupOutcome:
        """Try to loot the chest at *spot*.

        Loot is only rolled when there is room, so a refused pickup
        consumes no randomness and leaves the chest where it is.
        """
        if self.is_full:
            last = self._last_warning_ms.get(spot)
            if last is not None and now_ms - last < self.warning_cooldown_ms:
                return PickupOutcome(PickupResult.FULL_SILENCED)
            self._last_warning_ms[spot] = now_ms
            logger.debug("Pickup refused at %s: inventory full", spot)
            return PickupOutcome(PickupResult.FULL, message=INVENTORY_FULL_MESSAGE)

        item = roll_loot(rng)
        self.player.inventory.append(item)
        self._last_warning_ms.pop(spot, None)
        logger.info("Picked up %s", item.name)
        return PickupOutcome(PickupResult.ADDED, item=item, message=f"Got {item.name}!")
