"""Per-battle and per-run counters collected while a run is played.

The run manager appends a :class:`BattleTelemetry` each time a battle
closes and bumps the :class:`RunTelemetry` counters on level clears,
deaths and pickups.  Batch scripts aggregate these records across seeds.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


@dataclass
class BattleTelemetry:
    """Stats from a single encounter.

    Attributes
    ----------
    enemy_name:
        Display name of the enemy fought.
    result:
        ``"win"`` if the enemy was defeated, ``"loss"`` otherwise.
    turns:
        Number of player actions that consumed a turn.
    player_hp_start:
        Player HP when the battle started.
    player_hp_end:
        Player HP when the battle ended (0 on loss).
    hp_lost:
        ``player_hp_start - player_hp_end``, floored at 0 (heals can
        leave the player above the starting HP).
    damage_dealt:
        Sum of the player's hits by the damage formula (the last hit may
        exceed the HP the enemy had left).
    heals_cast:
        Number of successful heal spells.
    """

    enemy_name: str
    result: Literal["win", "loss"]
    turns: int
    player_hp_start: int
    player_hp_end: int
    hp_lost: int
    damage_dealt: int
    heals_cast: int = 0


@dataclass
class RunTelemetry:
    """Stats from a headless run.

    Attributes
    ----------
    seed:
        The master RNG seed used for this run.
    battles:
        Ordered list of battle telemetry, one per encounter.
    levels_cleared:
        Bosses defeated (each one advances a level).
    deaths:
        Times the run was reset to level 1.
    items_collected:
        Names of items picked up from chests, in order.
    final_level:
        Level the player was on when the run stopped.
    steps:
        Agent decisions taken.
    """

    seed: int
    battles: list[BattleTelemetry] = field(default_factory=list)
    levels_cleared: int = 0
    deaths: int = 0
    items_collected: list[str] = field(default_factory=list)
    final_level: int = 1
    steps: int = 0
