"""Turn-based battle between the player and a single enemy.

Phases::

    PLAYER_TURN -> ENEMY_TURN -> PLAYER_TURN | WON | LOST

The player acts with :meth:`BattleResolver.attack` or
:meth:`BattleResolver.cast_heal`.  The enemy's reply is not driven by the
caller: it is scheduled on the :class:`Scheduler` and fires after
``enemy_turn_delay_ms`` of virtual time.  Once the battle is decided, a
second timer hands a :class:`BattleOutcome` to the exit callback.

The player is shared by reference (damage persists after the battle); the
enemy is copied on entry.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Literal

from pydantic import BaseModel

from maze_escape.sim.config import DEFAULT_CONFIG, GameConfig
from maze_escape.sim.content.archetypes import Encounter
from maze_escape.sim.core.entities import EnemyStats, ProgressionState
from maze_escape.sim.core.scheduler import Scheduler, TimerHandle
from maze_escape.sim.mechanics.damage import enemy_hits_player, player_hits_enemy
from maze_escape.sim.mechanics.magic import cast_heal
from maze_escape.sim.telemetry import BattleTelemetry

logger = logging.getLogger(__name__)

NOT_ENOUGH_MP_MESSAGE = "Not enough MP!"


class BattlePhase(str, Enum):
    PLAYER_TURN = "player_turn"
    ENEMY_TURN = "enemy_turn"
    WON = "won"
    LOST = "lost"


class BattleOutcome(BaseModel):
    """What the battle reports back to the maze when it closes."""

    result: Literal["win", "loss"]
    leveled_up: bool = False
    """True only when the defeated enemy was the boss."""


class BattleResolver:
    """Runs one encounter to completion.

    Parameters
    ----------
    player:
        Live progression state; mutated in place.
    enemy:
        Enemy template for this encounter.  A deep copy is fought.
    scheduler:
        Clock used to pace the enemy turn and the exit.  Without one,
        delayed steps run immediately.
    config:
        Source of MP cost, heal amount and delays.
    on_exit:
        Called with the :class:`BattleOutcome` once the exit delay has
        elapsed after a win or loss.
    """

    def __init__(
        self,
        player: ProgressionState,
        enemy: EnemyStats,
        scheduler: Scheduler | None = None,
        config: GameConfig = DEFAULT_CONFIG,
        on_exit: Callable[[BattleOutcome], None] | None = None,
    ) -> None:
        self.player = player
        self.enemy = enemy.model_copy(deep=True)
        self.config = config
        self.phase = BattlePhase.PLAYER_TURN
        self.messages: list[str] = ["Battle Start!"]

        self.turns = 0
        self.damage_dealt = 0
        self.heals_cast = 0
        self.player_hp_start = player.current_hp

        self._scheduler = scheduler
        self._on_exit = on_exit
        self._pending: TimerHandle | None = None
        self._generation = 0
        self._closed = False
        self._outcome: BattleOutcome | None = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_boss(self) -> bool:
        return self.enemy.archetype == Encounter.BOSS.value

    @property
    def is_over(self) -> bool:
        return self.phase in (BattlePhase.WON, BattlePhase.LOST)

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def outcome(self) -> BattleOutcome | None:
        """Set as soon as the battle is decided (before the exit delay)."""
        return self._outcome

    @property
    def last_message(self) -> str:
        return self.messages[-1]

    @property
    def accepts_input(self) -> bool:
        return self.phase == BattlePhase.PLAYER_TURN and not self._closed

    # ------------------------------------------------------------------
    # Player actions
    # ------------------------------------------------------------------

    def attack(self) -> bool:
        """Hit the enemy.  Returns ``False`` (and does nothing) off-turn."""
        if not self.accepts_input:
            return False

        damage = player_hits_enemy(self.player, self.enemy)
        self.damage_dealt += damage
        self.turns += 1
        self._say(f"You attacked for {damage} damage!")
        logger.debug(
            "Player hits %s for %d (%d/%d left)",
            self.enemy.name, damage, self.enemy.current_hp, self.enemy.max_hp,
        )

        if self.enemy.is_dead:
            self._finish(BattlePhase.WON)
        else:
            self._end_player_turn()
        return True

    def cast_heal(self) -> bool:
        """Spend MP to heal.

        With too little MP the action is refused: a message is shown, the
        turn is not consumed, and ``False`` is returned.
        """
        if not self.accepts_input:
            return False

        healed = cast_heal(self.player, self.config.heal_mp_cost, self.config.heal_amount)
        if healed is None:
            self._say(NOT_ENOUGH_MP_MESSAGE)
            return False

        self.heals_cast += 1
        self.turns += 1
        self._say(f"You healed {self.config.heal_amount} HP!")
        self._end_player_turn()
        return True

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Tear the battle down.  Pending callbacks become no-ops."""
        if self._closed:
            return
        self._closed = True
        self._generation += 1
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def telemetry(self) -> BattleTelemetry:
        return BattleTelemetry(
            enemy_name=self.enemy.name,
            result="win" if self.phase == BattlePhase.WON else "loss",
            turns=self.turns,
            player_hp_start=self.player_hp_start,
            player_hp_end=self.player.current_hp,
            hp_lost=max(0, self.player_hp_start - self.player.current_hp),
            damage_dealt=self.damage_dealt,
            heals_cast=self.heals_cast,
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _end_player_turn(self) -> None:
        self.phase = BattlePhase.ENEMY_TURN
        self._schedule(self.config.enemy_turn_delay_ms, self._enemy_turn, "enemy_turn")

    def _enemy_turn(self) -> None:
        if self.phase != BattlePhase.ENEMY_TURN:
            return

        damage = enemy_hits_player(self.enemy, self.player)
        self._say(f"{self.enemy.name} attacked you for {damage} damage!")
        logger.debug(
            "%s hits player for %d (%d/%d left)",
            self.enemy.name, damage, self.player.current_hp, self.player.max_hp,
        )

        if self.player.is_dead:
            self._finish(BattlePhase.LOST)
        else:
            self.phase = BattlePhase.PLAYER_TURN

    def _finish(self, phase: BattlePhase) -> None:
        self.phase = phase
        if phase == BattlePhase.WON:
            self._outcome = BattleOutcome(result="win", leveled_up=self.is_boss)
            self._say("You Won!")
            delay = self.config.win_exit_delay_ms
        else:
            self._outcome = BattleOutcome(result="loss")
            self._say("You Died...")
            delay = self.config.loss_exit_delay_ms

        logger.info("Battle against %s ended: %s", self.enemy.name, self._outcome.result)
        self._schedule(delay, self._exit, "exit")

    def _exit(self) -> None:
        outcome = self._outcome
        self.close()
        if self._on_exit is not None and outcome is not None:
            self._on_exit(outcome)

    def _schedule(self, delay_ms: int, step: Callable[[], None], label: str) -> None:
        if self._scheduler is None:
            step()
            return

        generation = self._generation

        def guarded() -> None:
            self._pending = None
            if self._closed or generation != self._generation:
                return
            step()

        self._pending = self._scheduler.schedule(delay_ms, guarded, label=label)

    def _say(self, message: str) -> None:
        self.messages.append(message)
