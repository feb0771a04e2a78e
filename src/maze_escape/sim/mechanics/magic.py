"""MP system -- spend and heal."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from maze_escape.sim.core.entities import ProgressionState


def spend_mp(player: ProgressionState, amount: int) -> bool:
    """Attempt to spend MP.  Returns False if insufficient.

    Parameters
    ----------
    player:
        The player's progression state.
    amount:
        MP cost to pay.

    Returns
    -------
    bool
        True if the MP was spent, False if the player did not have enough
        (in which case nothing changes).
    """
    if player.current_mp < amount:
        return False
    player.current_mp -= amount
    return True


def cast_heal(player: ProgressionState, cost: int, amount: int) -> int | None:
    """Pay *cost* MP to heal *amount* HP (capped at max HP).

    Returns the HP restored, or ``None`` if the player could not pay.
    """
    if not spend_mp(player, cost):
        return None
    return player.heal(amount)
