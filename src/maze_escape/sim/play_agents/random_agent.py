"""Random-walk agent -- wanders the maze and fights with a simple rule.

The ``RandomAgent`` is the baseline for batch runs: it lets us verify that
the whole loop (maze, battles, inventory, level advance, death reset)
works end-to-end.

Behaviour:
    - Steps in a random open direction, preferring not to turn straight
      back unless the corridor is a dead end.
    - Heals when HP drops below ``heal_threshold`` of max and MP allows,
      otherwise attacks.
    - Equips any inventory item that beats what is in its slot, and drops
      the weakest item when the inventory is full.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from maze_escape.sim.core.rng import GameRNG
from maze_escape.sim.dungeon.level import Direction
from maze_escape.sim.play_agents.base import BattleAction, PlayAgent

if TYPE_CHECKING:
    from maze_escape.sim.battle import BattleResolver
    from maze_escape.sim.core.entities import Item, ProgressionState
    from maze_escape.sim.dungeon.level import Level
    from maze_escape.sim.mechanics.inventory import InventoryManager

_OPPOSITE: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class RandomAgent(PlayAgent):
    """Agent that random-walks and fights greedily.

    Parameters
    ----------
    rng:
        Seeded RNG for deterministic randomness.  If ``None``, a default
        ``GameRNG(seed=0)`` is created.
    heal_threshold:
        Fraction of max HP (0.0 -- 1.0) below which the agent heals.
    """

    def __init__(
        self,
        rng: GameRNG | None = None,
        heal_threshold: float = 0.40,
    ) -> None:
        self._rng = rng or GameRNG(seed=0)
        self._heal_threshold = heal_threshold
        self._last_move: Direction | None = None

    # ------------------------------------------------------------------
    # PlayAgent interface
    # ------------------------------------------------------------------

    def choose_move(self, level: Level, player: ProgressionState) -> Direction | None:
        options = level.open_directions()
        if not options:
            return None
        if self._last_move is not None and len(options) > 1:
            back = _OPPOSITE[self._last_move]
            options = [d for d in options if d != back]
        self._last_move = self._rng.random_choice(options)
        return self._last_move

    def choose_battle_action(self, battle: BattleResolver) -> BattleAction:
        player = battle.player
        low = player.current_hp < player.max_hp * self._heal_threshold
        if low and player.current_mp >= battle.config.heal_mp_cost:
            return "heal"
        return "attack"

    def wants_inventory(self, player: ProgressionState) -> bool:
        return any(_is_upgrade(player, item) for item in player.inventory)

    def manage_inventory(self, inventory: InventoryManager) -> None:
        player = inventory.player
        index = 0
        while index < len(player.inventory):
            if _is_upgrade(player, player.inventory[index]):
                inventory.equip(index)
                # A swap puts the old item at this index; re-check it.
                continue
            index += 1

        if inventory.is_full and player.inventory:
            weakest = min(range(len(player.inventory)), key=lambda i: player.inventory[i].value)
            inventory.discard(weakest)


def _is_upgrade(player: ProgressionState, item: Item) -> bool:
    current = player.equipment.slot_for(item.item_type)
    return current is None or item.value > current.value
