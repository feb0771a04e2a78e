"""Damage calculation and application.

Every hit uses the same flat formula::

    damage = max(0, attack - defense)

Player attack and defense include the bonus from equipped gear.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from maze_escape.sim.core.entities import EnemyStats, Entity, ProgressionState


def calculate_damage(attack: int, defense: int) -> int:
    """Return ``attack - defense``, floored at 0."""
    return max(0, attack - defense)


def deal_damage(target: Entity, attack: int, defense: int) -> int:
    """Hit *target* and return the damage of the hit.

    The returned value is the formula damage, even when it exceeds the HP
    the target had left.  HP itself never drops below 0.
    """
    damage = calculate_damage(attack, defense)
    target.take_damage(damage)
    return damage


def player_hits_enemy(player: ProgressionState, enemy: EnemyStats) -> int:
    return deal_damage(enemy, player.effective_attack, enemy.defense)


def enemy_hits_player(enemy: EnemyStats, player: ProgressionState) -> int:
    return deal_damage(player, enemy.attack, player.effective_defense)
