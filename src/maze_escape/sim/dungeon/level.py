"""One explorable level: a maze, what was placed on it, and the player's tile.

Movement is tile-by-tile.  Walls and the border block a step.  Stepping
onto a tile that holds a monster, the boss or a chest reports a
:class:`Contact`; deciding what happens next (battle, pickup) is up to the
caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from maze_escape.sim.config import DEFAULT_CONFIG, GameConfig
from maze_escape.sim.core.rng import GameRNG
from maze_escape.sim.dungeon.maze_gen import GridPosition, Maze, MazeGenerator
from maze_escape.sim.dungeon.placement import EntityKind, EntityPlacer, Placements


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_MARKERS: dict[EntityKind, str] = {
    EntityKind.MONSTER: "m",
    EntityKind.BOSS: "B",
    EntityKind.CHEST: "$",
    EntityKind.PLAYER_START: "@",
}


@dataclass(frozen=True)
class Contact:
    """The player is standing on something."""

    kind: EntityKind
    position: GridPosition


class Level:
    """Mutable exploration state layered on an immutable maze."""

    def __init__(self, number: int, maze: Maze, placements: Placements) -> None:
        self.number = number
        self.maze = maze
        self.placements = placements
        self.player_pos = placements.player_start
        self.monsters: set[GridPosition] = set(placements.monsters)
        self.boss: GridPosition | None = placements.boss
        self.chests: set[GridPosition] = set(placements.chests)

    @classmethod
    def generate(
        cls,
        number: int,
        rng: GameRNG,
        config: GameConfig = DEFAULT_CONFIG,
    ) -> Level:
        """Build level *number* from forked ``maze`` and ``placement`` streams."""
        maze = MazeGenerator(config.braid_probability).generate(
            config.maze_cols, config.maze_rows, rng.fork("maze"),
        )
        placer = EntityPlacer(
            max_attempts=config.placement_attempts,
            boss_min_offset=config.boss_min_offset,
        )
        placements = placer.place(
            maze, rng.fork("placement"),
            monsters=config.monster_count, chests=config.chest_count,
        )
        return cls(number, maze, placements)

    # -- queries -------------------------------------------------------------

    @property
    def boss_alive(self) -> bool:
        return self.boss is not None

    def can_move(self, direction: Direction) -> bool:
        return self.maze.is_floor(self.player_pos.offset(*direction.delta))

    def open_directions(self) -> list[Direction]:
        return [d for d in Direction if self.can_move(d)]

    def contact_at(self, pos: GridPosition) -> Contact | None:
        if pos in self.monsters:
            return Contact(EntityKind.MONSTER, pos)
        if pos == self.boss:
            return Contact(EntityKind.BOSS, pos)
        if pos in self.chests:
            return Contact(EntityKind.CHEST, pos)
        return None

    # -- mutations -----------------------------------------------------------

    def move(self, direction: Direction) -> Contact | None:
        """Step one tile.  Returns what the player landed on, if anything.

        A blocked step leaves the player in place and reports nothing.
        """
        if not self.can_move(direction):
            return None
        self.player_pos = self.player_pos.offset(*direction.delta)
        return self.contact_at(self.player_pos)

    def remove(self, contact: Contact) -> None:
        """Take the contacted entity off the map."""
        if contact.kind == EntityKind.MONSTER:
            self.monsters.discard(contact.position)
        elif contact.kind == EntityKind.BOSS:
            self.boss = None
        elif contact.kind == EntityKind.CHEST:
            self.chests.discard(contact.position)

    # -- display -------------------------------------------------------------

    def render(self) -> str:
        markers: dict[GridPosition, str] = {}
        for pos in self.chests:
            markers[pos] = _MARKERS[EntityKind.CHEST]
        for pos in self.monsters:
            markers[pos] = _MARKERS[EntityKind.MONSTER]
        if self.boss is not None:
            markers[self.boss] = _MARKERS[EntityKind.BOSS]
        markers[self.player_pos] = _MARKERS[EntityKind.PLAYER_START]
        return self.maze.render(markers)

    def __repr__(self) -> str:
        return (
            f"Level(number={self.number}, player={self.player_pos}, "
            f"monsters={len(self.monsters)}, boss={self.boss}, chests={len(self.chests)})"
        )
