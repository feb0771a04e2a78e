"""Entity placement -- scatters the player, monsters, a boss and chests.

Placement order matters: player, monsters, boss, chests.  Every category
shares one occupancy set, so later categories avoid earlier ones.  Random
categories use rejection sampling with a bounded number of draws each; a
category that runs out of draws is placed short instead of failing the
level.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from maze_escape.sim.core.rng import GameRNG
from maze_escape.sim.dungeon.maze_gen import START_CELL, GridPosition, Maze

logger = logging.getLogger(__name__)


class EntityKind(str, Enum):
    PLAYER_START = "player_start"
    MONSTER = "monster"
    BOSS = "boss"
    CHEST = "chest"


@dataclass(frozen=True)
class PlacementRecord:
    position: GridPosition
    kind: EntityKind


@dataclass
class Placements:
    """Everything placed on one level."""

    player_start: GridPosition
    monsters: list[GridPosition] = field(default_factory=list)
    boss: GridPosition | None = None
    chests: list[GridPosition] = field(default_factory=list)

    def records(self) -> list[PlacementRecord]:
        """All placements in placement order."""
        records = [PlacementRecord(self.player_start, EntityKind.PLAYER_START)]
        records.extend(PlacementRecord(p, EntityKind.MONSTER) for p in self.monsters)
        if self.boss is not None:
            records.append(PlacementRecord(self.boss, EntityKind.BOSS))
        records.extend(PlacementRecord(p, EntityKind.CHEST) for p in self.chests)
        return records


class EntityPlacer:
    """Places entities on the floor tiles of a maze.

    Parameters
    ----------
    max_attempts:
        Random draws allowed per category before it is placed short.
    boss_min_offset:
        The boss is only accepted where ``x > offset or y > offset``,
        keeping it away from the top-left start.
    """

    def __init__(self, max_attempts: int = 100, boss_min_offset: int = 5) -> None:
        self.max_attempts = max_attempts
        self.boss_min_offset = boss_min_offset

    def place(
        self,
        maze: Maze,
        rng: GameRNG,
        monsters: int,
        chests: int,
        start_hint: GridPosition = START_CELL,
    ) -> Placements:
        occupied: set[GridPosition] = set()

        player_start = self.find_player_start(maze, start_hint)
        occupied.add(player_start)

        monster_positions = self._scatter(maze, rng, occupied, monsters, "monster")

        bosses = self._scatter(
            maze, rng, occupied, 1, "boss",
            accept=lambda p: p.x > self.boss_min_offset or p.y > self.boss_min_offset,
        )

        chest_positions = self._scatter(maze, rng, occupied, chests, "chest")

        placements = Placements(
            player_start=player_start,
            monsters=monster_positions,
            boss=bosses[0] if bosses else None,
            chests=chest_positions,
        )
        logger.debug(
            "Placed player at %s, %d monsters, boss=%s, %d chests",
            player_start, len(monster_positions), placements.boss,
            len(chest_positions),
        )
        return placements

    # ------------------------------------------------------------------
    # Player start
    # ------------------------------------------------------------------

    @staticmethod
    def find_player_start(maze: Maze, hint: GridPosition = START_CELL) -> GridPosition:
        """Scan row-major from *hint* to the first floor tile.

        Columns wrap inside the interior: stepping onto the right border
        moves to column 1 of the next row.
        """
        x, y = max(hint.x, 1), max(hint.y, 1)
        while y < maze.height - 1:
            pos = GridPosition(x, y)
            if maze.is_floor(pos):
                return pos
            x += 1
            if x >= maze.width - 1:
                x = 1
                y += 1
        raise ValueError(f"No floor tile at or after {hint} to start on")

    # ------------------------------------------------------------------
    # Rejection sampling
    # ------------------------------------------------------------------

    def _scatter(
        self,
        maze: Maze,
        rng: GameRNG,
        occupied: set[GridPosition],
        count: int,
        label: str,
        accept: Callable[[GridPosition], bool] | None = None,
    ) -> list[GridPosition]:
        """Draw random interior tiles until *count* are placed or the
        attempt budget is spent."""
        placed: list[GridPosition] = []
        attempts = 0
        while len(placed) < count and attempts < self.max_attempts:
            attempts += 1
            pos = GridPosition(*rng.interior_cell(maze.width, maze.height))
            if not maze.is_floor(pos) or pos in occupied:
                continue
            if accept is not None and not accept(pos):
                continue
            occupied.add(pos)
            placed.append(pos)

        if len(placed) < count:
            logger.warning(
                "Placed only %d/%d %s(s) after %d attempts",
                len(placed), count, label, attempts,
            )
        return placed


def place_entities(
    maze: Maze,
    rng: GameRNG,
    monsters: int = 5,
    chests: int = 3,
    start_hint: GridPosition = START_CELL,
    max_attempts: int = 100,
) -> Placements:
    """Convenience wrapper around :class:`EntityPlacer`."""
    placer = EntityPlacer(max_attempts=max_attempts)
    return placer.place(maze, rng, monsters, chests, start_hint=start_hint)
