"""Maze generation for a single level.

A randomized recursive backtracker carves a spanning tree over the cells
at odd coordinates, knocking out the wall tile between each pair of cells
it links.  A braiding pass then opens some extra walls to create loops:

- every interior wall with at least two floor neighbours (4-neighbourhood)
  flips to floor with a fixed probability (10% by default)
- the pass walks the grid once, row-major, and updates it in place: a
  wall opened earlier counts as floor for the walls after it, but no tile
  is looked at twice

Braiding only ever adds floor, so every carved cell stays reachable from
the start cell.  Rows/columns that fall outside the odd lattice (e.g. the
last column of an even-width maze) stay wall.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from maze_escape.sim.config import MIN_MAZE_SIZE
from maze_escape.sim.core.rng import GameRNG

logger = logging.getLogger(__name__)


class Tile(str, Enum):
    WALL = "wall"
    FLOOR = "floor"


@dataclass(frozen=True, order=True)
class GridPosition:
    """Integer coordinates into a maze; ``(0, 0)`` is the top-left tile."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> GridPosition:
        return GridPosition(self.x + dx, self.y + dy)

    def neighbours(self) -> list[GridPosition]:
        """The four orthogonal neighbours (up, down, left, right)."""
        return [self.offset(dx, dy) for dx, dy in _STEPS]


START_CELL = GridPosition(1, 1)

# Orthogonal unit steps: up, down, left, right
_STEPS: list[tuple[int, int]] = [(0, -1), (0, 1), (-1, 0), (1, 0)]


@dataclass(frozen=True)
class Maze:
    """An immutable grid of wall/floor tiles."""

    width: int
    height: int
    tiles: tuple[tuple[Tile, ...], ...]
    """Row-major: ``tiles[y][x]``."""

    carved: frozenset[GridPosition]
    """Tiles opened by the backtracker (before braiding)."""

    # -- queries -------------------------------------------------------------

    def in_bounds(self, pos: GridPosition) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def tile_at(self, pos: GridPosition) -> Tile:
        return self.tiles[pos.y][pos.x]

    def is_floor(self, pos: GridPosition) -> bool:
        return self.in_bounds(pos) and self.tiles[pos.y][pos.x] == Tile.FLOOR

    def floor_positions(self) -> Iterator[GridPosition]:
        for y, row in enumerate(self.tiles):
            for x, tile in enumerate(row):
                if tile == Tile.FLOOR:
                    yield GridPosition(x, y)

    def reachable_from(self, start: GridPosition) -> set[GridPosition]:
        """Flood-fill over floor tiles from *start* (4-neighbourhood)."""
        if not self.is_floor(start):
            return set()
        seen = {start}
        stack = [start]
        while stack:
            current = stack.pop()
            for nxt in current.neighbours():
                if nxt not in seen and self.is_floor(nxt):
                    seen.add(nxt)
                    stack.append(nxt)
        return seen

    def render(self, markers: dict[GridPosition, str] | None = None) -> str:
        """ASCII picture: ``#`` wall, ``.`` floor, plus optional *markers*."""
        markers = markers or {}
        lines = []
        for y, row in enumerate(self.tiles):
            chars = []
            for x, tile in enumerate(row):
                pos = GridPosition(x, y)
                if pos in markers:
                    chars.append(markers[pos])
                else:
                    chars.append("#" if tile == Tile.WALL else ".")
            lines.append("".join(chars))
        return "\n".join(lines)


class MazeGenerator:
    """Builds braided backtracker mazes.

    Parameters
    ----------
    braid_probability:
        Chance that an eligible interior wall is opened by the braiding
        pass.
    """

    def __init__(self, braid_probability: float = 0.10) -> None:
        self.braid_probability = braid_probability

    def generate(self, width: int, height: int, rng: GameRNG) -> Maze:
        """Generate a *width* x *height* maze.

        Raises ``ValueError`` if either dimension is below the minimum
        interior size.
        """
        if width < MIN_MAZE_SIZE or height < MIN_MAZE_SIZE:
            raise ValueError(
                f"Maze must be at least {MIN_MAZE_SIZE}x{MIN_MAZE_SIZE}, "
                f"got {width}x{height}"
            )

        grid = [[Tile.WALL] * width for _ in range(height)]
        carved = self._carve(grid, width, height, rng)
        opened = self._braid(grid, width, height, rng)

        logger.debug(
            "Generated %dx%d maze: %d carved, %d braided",
            width, height, len(carved), opened,
        )
        return Maze(
            width=width,
            height=height,
            tiles=tuple(tuple(row) for row in grid),
            carved=frozenset(carved),
        )

    # -- passes ----------------------------------------------------------------

    def _carve(
        self,
        grid: list[list[Tile]],
        width: int,
        height: int,
        rng: GameRNG,
    ) -> set[GridPosition]:
        """Recursive backtracker from the start cell, with an explicit stack."""
        carved = {START_CELL}
        grid[START_CELL.y][START_CELL.x] = Tile.FLOOR
        stack = [START_CELL]

        while stack:
            current = stack[-1]
            candidates: list[tuple[GridPosition, GridPosition]] = []
            for dx, dy in _STEPS:
                nxt = current.offset(2 * dx, 2 * dy)
                if (
                    0 < nxt.x < width - 1
                    and 0 < nxt.y < height - 1
                    and grid[nxt.y][nxt.x] == Tile.WALL
                ):
                    candidates.append((nxt, current.offset(dx, dy)))

            if not candidates:
                stack.pop()
                continue

            nxt, between = rng.random_choice(candidates)
            for pos in (between, nxt):
                grid[pos.y][pos.x] = Tile.FLOOR
                carved.add(pos)
            stack.append(nxt)

        return carved

    def _braid(
        self,
        grid: list[list[Tile]],
        width: int,
        height: int,
        rng: GameRNG,
    ) -> int:
        """Open random interior walls that touch two or more floor tiles."""
        opened = 0
        for y in range(1, height - 1):
            for x in range(1, width - 1):
                if grid[y][x] != Tile.WALL:
                    continue
                floor_neighbours = sum(
                    1 for dx, dy in _STEPS
                    if grid[y + dy][x + dx] == Tile.FLOOR
                )
                if floor_neighbours >= 2 and rng.chance(self.braid_probability):
                    grid[y][x] = Tile.FLOOR
                    opened += 1
        return opened
