"""Run manager -- the top-level state machine for a maze run.

A run is always in exactly one mode:

- ``EXPLORE``: walking the current level's maze
- ``BATTLE``: a :class:`BattleResolver` owns the player
- ``INVENTORY``: the inventory screen owns the player

Each mode change is appended to :attr:`RunManager.transitions` together
with its typed payload.  The single :class:`ProgressionState` is handed
from mode to mode by reference; only the active mode may mutate it.

Beating the boss restores HP/MP and regenerates the next level with the
same progression state.  Losing a battle throws the progression state
away (equipment and inventory included) and restarts at level 1.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field

from maze_escape.sim.battle import BattleOutcome, BattleResolver
from maze_escape.sim.config import DEFAULT_CONFIG, GameConfig
from maze_escape.sim.content.archetypes import Encounter, new_player, spawn_enemy
from maze_escape.sim.core.entities import EnemyStats, ItemType, ProgressionState
from maze_escape.sim.core.game_state import GameState
from maze_escape.sim.core.rng import GameRNG
from maze_escape.sim.core.scheduler import Scheduler
from maze_escape.sim.dungeon.level import Contact, Direction, Level
from maze_escape.sim.dungeon.placement import EntityKind
from maze_escape.sim.mechanics.inventory import InventoryManager, PickupOutcome, PickupResult
from maze_escape.sim.telemetry import RunTelemetry

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    EXPLORE = "explore"
    BATTLE = "battle"
    INVENTORY = "inventory"


# ---------------------------------------------------------------------------
# Transition payloads
# ---------------------------------------------------------------------------

class LevelEnter(BaseModel):
    """Enter a level.  ``player=None`` starts from the default loadout."""

    level: int = Field(default=1, ge=1)
    player: ProgressionState | None = None


class BattleEnter(BaseModel):
    player: ProgressionState
    """Shared with the level; not a copy."""

    enemy: EnemyStats
    """The enemy as it stood when the battle began."""

    encounter: Encounter


class InventoryEnter(BaseModel):
    player: ProgressionState


@dataclass
class Transition:
    source: Mode | None
    target: Mode
    payload: BaseModel | None = None


# ---------------------------------------------------------------------------
# RunManager
# ---------------------------------------------------------------------------

class RunManager:
    """Drives exploration, battles and the inventory screen for one run.

    Parameters
    ----------
    rng:
        Master RNG for the run.  Forked per level and for loot.
    config:
        Tunable constants; defaults to :data:`DEFAULT_CONFIG`.
    scheduler:
        Virtual clock shared with battles.  A fresh one is created if
        omitted.
    """

    def __init__(
        self,
        rng: GameRNG,
        config: GameConfig | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        self.rng = rng
        self.config = config or DEFAULT_CONFIG
        self.scheduler = scheduler or Scheduler()

        self.mode: Mode | None = None
        self.state: GameState | None = None
        self.level: Level | None = None
        self.battle: BattleResolver | None = None
        self.inventory: InventoryManager | None = None

        self.transitions: list[Transition] = []
        self.notices: list[str] = []
        """Transient messages for the player (pickups, full inventory)."""

        self.telemetry = RunTelemetry(seed=rng.seed)
        self._loot_rng = rng.fork("loot")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def player(self) -> ProgressionState:
        if self.state is None:
            raise RuntimeError("Run has not been started")
        return self.state.player

    @property
    def level_number(self) -> int:
        return self.state.level if self.state is not None else 0

    # ------------------------------------------------------------------
    # Level lifecycle
    # ------------------------------------------------------------------

    def start(self, player: ProgressionState | None = None) -> None:
        """Begin the run on level 1."""
        self.enter_level(LevelEnter(level=1, player=player))

    def enter_level(self, request: LevelEnter) -> None:
        """Generate and enter a level, keeping the given progression state."""
        player = request.player if request.player is not None else new_player(self.config)
        attempt = self.state.attempt if self.state is not None else 1
        self.state = GameState(player=player, level=request.level, attempt=attempt, rng=self.rng)

        level_rng = self.rng.fork(f"attempt-{attempt}", f"level-{request.level}")
        self.level = Level.generate(request.level, level_rng, self.config)
        self.inventory = InventoryManager(
            player,
            capacity=self.config.inventory_capacity,
            warning_cooldown_ms=self.config.full_warning_cooldown_ms,
        )
        self.telemetry.final_level = request.level

        logger.info("Entering level %d (attempt %d)", request.level, attempt)
        self._transition(Mode.EXPLORE, LevelEnter(level=request.level, player=player))

    def restart(self) -> None:
        """Throw the run away and start again on level 1 with default stats.

        Any live battle is torn down first so its pending timers can no
        longer touch the discarded state.
        """
        if self.battle is not None:
            self.battle.close()
            self.battle = None
        if self.state is not None:
            self.state.attempt += 1
        self.enter_level(LevelEnter(level=1))

    # ------------------------------------------------------------------
    # Exploration
    # ------------------------------------------------------------------

    def move(self, direction: Direction | str) -> bool:
        """Step the player.  Returns ``False`` outside exploration or when
        the step is blocked."""
        if self.mode != Mode.EXPLORE or self.level is None:
            return False
        direction = Direction(direction)
        if not self.level.can_move(direction):
            return False
        contact = self.level.move(direction)
        if contact is not None:
            self._resolve_contact(contact)
        return True

    def tick(self, ms: int) -> int:
        """Let *ms* of virtual time pass.

        Fires due battle timers and, while exploring, re-checks the tile
        the player stands on (a refused chest is retried once the
        warning cooldown allows).
        """
        fired = self.scheduler.advance(ms)
        if self.mode == Mode.EXPLORE and self.level is not None:
            contact = self.level.contact_at(self.level.player_pos)
            if contact is not None and contact.kind == EntityKind.CHEST:
                self._pickup(contact)
        return fired

    def _resolve_contact(self, contact: Contact) -> None:
        if contact.kind == EntityKind.MONSTER:
            self.level.remove(contact)
            self._start_battle(Encounter.MONSTER)
        elif contact.kind == EntityKind.BOSS:
            self.level.remove(contact)
            self._start_battle(Encounter.BOSS)
        elif contact.kind == EntityKind.CHEST:
            self._pickup(contact)

    def _pickup(self, contact: Contact) -> PickupOutcome:
        outcome = self.inventory.pickup(contact.position, self.scheduler.now_ms, self._loot_rng)
        if outcome.result == PickupResult.ADDED:
            self.level.remove(contact)
            self.telemetry.items_collected.append(outcome.item.name)
        if outcome.message is not None:
            self.notices.append(outcome.message)
        return outcome

    # ------------------------------------------------------------------
    # Inventory screen
    # ------------------------------------------------------------------

    def open_inventory(self) -> bool:
        if self.mode != Mode.EXPLORE:
            return False
        self._transition(Mode.INVENTORY, InventoryEnter(player=self.player))
        return True

    def close_inventory(self) -> bool:
        if self.mode != Mode.INVENTORY:
            return False
        self._transition(Mode.EXPLORE)
        return True

    def equip(self, index: int) -> bool:
        if self.mode != Mode.INVENTORY:
            return False
        return self.inventory.equip(index)

    def discard(self, index: int) -> bool:
        if self.mode != Mode.INVENTORY:
            return False
        return self.inventory.discard(index)

    def unequip(self, item_type: ItemType | str) -> bool:
        if self.mode != Mode.INVENTORY:
            return False
        return self.inventory.unequip(ItemType(item_type))

    # ------------------------------------------------------------------
    # Battle
    # ------------------------------------------------------------------

    def attack(self) -> bool:
        if self.mode != Mode.BATTLE or self.battle is None:
            return False
        return self.battle.attack()

    def cast_heal(self) -> bool:
        if self.mode != Mode.BATTLE or self.battle is None:
            return False
        return self.battle.cast_heal()

    def _start_battle(self, encounter: Encounter) -> None:
        def on_exit(outcome: BattleOutcome) -> None:
            self._on_battle_exit(battle, outcome)

        battle = BattleResolver(
            self.player,
            spawn_enemy(encounter),
            scheduler=self.scheduler,
            config=self.config,
            on_exit=on_exit,
        )
        self.battle = battle
        logger.info("Battle triggered with %s", encounter.value)
        self._transition(
            Mode.BATTLE,
            BattleEnter(
                player=self.player, enemy=battle.enemy.model_copy(), encounter=encounter,
            ),
        )

    def _on_battle_exit(self, battle: BattleResolver, outcome: BattleOutcome) -> None:
        if battle is not self.battle:
            return

        self.telemetry.battles.append(battle.telemetry())
        self.battle = None
        self._transition(Mode.EXPLORE, outcome)

        if outcome.result == "loss":
            self.telemetry.deaths += 1
            logger.info("Player died on level %d; restarting run", self.level_number)
            self.restart()
        elif outcome.leveled_up:
            self.telemetry.levels_cleared += 1
            self.player.restore()
            self.enter_level(LevelEnter(level=self.level_number + 1, player=self.player))

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _transition(self, target: Mode, payload: BaseModel | None = None) -> None:
        self.transitions.append(Transition(source=self.mode, target=target, payload=payload))
        logger.debug("Mode %s -> %s", self.mode, target)
        self.mode = target
