"""Base class for agents that play a maze run headlessly.

All play agents must subclass ``PlayAgent`` and implement the abstract
methods.  The runner calls these at decision points: where to step while
exploring, what to do on the player's battle turn, and how to sort out
the inventory.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from maze_escape.sim.battle import BattleResolver
    from maze_escape.sim.core.entities import ProgressionState
    from maze_escape.sim.dungeon.level import Direction, Level
    from maze_escape.sim.mechanics.inventory import InventoryManager

BattleAction = Literal["attack", "heal"]


class PlayAgent(ABC):
    """Base class for AI agents that play the game."""

    @abstractmethod
    def choose_move(self, level: Level, player: ProgressionState) -> Direction | None:
        """Choose the next step in the maze.

        Parameters
        ----------
        level:
            The level being explored, giving the agent full observability.
        player:
            The player's progression state.

        Returns
        -------
        Direction | None
            A direction to step in, or ``None`` to stand still this step.
        """

    @abstractmethod
    def choose_battle_action(self, battle: BattleResolver) -> BattleAction:
        """Choose the player's action for the current battle turn.

        Returns
        -------
        str
            ``"attack"`` or ``"heal"``.
        """

    @abstractmethod
    def wants_inventory(self, player: ProgressionState) -> bool:
        """Return ``True`` to open the inventory screen before the next step."""

    @abstractmethod
    def manage_inventory(self, inventory: InventoryManager) -> None:
        """Equip, unequip or discard items while the inventory is open."""
