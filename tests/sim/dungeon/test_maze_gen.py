"""Tests for the braided backtracker maze generator."""

import pytest

from maze_escape.sim.core.rng import GameRNG
from maze_escape.sim.dungeon.maze_gen import (
    START_CELL,
    GridPosition,
    MazeGenerator,
    Tile,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_maze(seed: int = 42, width: int = 20, height: int = 15, braid: float = 0.10):
    return MazeGenerator(braid).generate(width, height, GameRNG(seed))


# ---------------------------------------------------------------------------
# Shape and bounds
# ---------------------------------------------------------------------------

class TestMazeShape:
    def test_dimensions(self):
        maze = _make_maze(width=20, height=15)

        assert maze.width == 20
        assert maze.height == 15
        assert len(maze.tiles) == 15
        assert all(len(row) == 20 for row in maze.tiles)

    def test_border_is_wall(self):
        for seed in range(10):
            maze = _make_maze(seed)
            for x in range(maze.width):
                assert maze.tile_at(GridPosition(x, 0)) == Tile.WALL
                assert maze.tile_at(GridPosition(x, maze.height - 1)) == Tile.WALL
            for y in range(maze.height):
                assert maze.tile_at(GridPosition(0, y)) == Tile.WALL
                assert maze.tile_at(GridPosition(maze.width - 1, y)) == Tile.WALL

    def test_start_cell_is_floor(self):
        assert _make_maze().is_floor(START_CELL)

    @pytest.mark.parametrize("width,height", [(4, 10), (10, 4), (0, 0)])
    def test_too_small_rejected(self, width, height):
        with pytest.raises(ValueError):
            MazeGenerator().generate(width, height, GameRNG(1))

    def test_minimum_size_generates(self):
        maze = _make_maze(width=5, height=5)

        assert maze.is_floor(GridPosition(1, 1))
        assert maze.is_floor(GridPosition(3, 3))

    def test_out_of_bounds_is_not_floor(self):
        maze = _make_maze()

        assert not maze.is_floor(GridPosition(-1, 1))
        assert not maze.is_floor(GridPosition(maze.width, 1))


# ---------------------------------------------------------------------------
# Connectivity
# ---------------------------------------------------------------------------

class TestMazeConnectivity:
    @pytest.mark.parametrize("width,height", [(5, 5), (7, 9), (20, 15), (30, 21)])
    def test_every_floor_tile_reachable(self, width, height):
        for seed in range(15):
            maze = _make_maze(seed, width, height)
            reachable = maze.reachable_from(START_CELL)

            assert set(maze.floor_positions()) == reachable

    def test_every_odd_cell_is_carved(self):
        maze = _make_maze(width=21, height=15)
        for y in range(1, maze.height - 1, 2):
            for x in range(1, maze.width - 1, 2):
                assert GridPosition(x, y) in maze.carved

    def test_carved_tiles_subset_of_floor(self):
        maze = _make_maze()

        assert maze.carved <= set(maze.floor_positions())

    def test_no_braiding_leaves_a_tree(self):
        maze = _make_maze(braid=0.0, width=21, height=15)
        floor = set(maze.floor_positions())

        assert floor == set(maze.carved)
        # A spanning tree over n cells has n - 1 connecting tiles
        cells = [p for p in floor if p.x % 2 == 1 and p.y % 2 == 1]
        assert len(floor) == 2 * len(cells) - 1

    def test_braiding_adds_loops(self):
        tree = _make_maze(seed=3, braid=0.0)
        braided = _make_maze(seed=3, braid=1.0)

        assert len(list(braided.floor_positions())) > len(list(tree.floor_positions()))


# ---------------------------------------------------------------------------
# Determinism and rendering
# ---------------------------------------------------------------------------

class TestMazeDeterminism:
    def test_same_seed_same_maze(self):
        assert _make_maze(99).tiles == _make_maze(99).tiles

    def test_different_seeds_differ(self):
        mazes = {_make_maze(seed).tiles for seed in range(5)}
        assert len(mazes) > 1

    def test_render(self):
        maze = _make_maze(width=5, height=5)
        text = maze.render({START_CELL: "@"})
        lines = text.splitlines()

        assert len(lines) == 5
        assert lines[0] == "#####"
        assert lines[1][1] == "@"


class TestBraidPass:
    def _grid(self, floor: set[tuple[int, int]]) -> list[list[Tile]]:
        return [
            [Tile.FLOOR if (x, y) in floor else Tile.WALL for x in range(5)]
            for y in range(5)
        ]

    def test_walls_opened_earlier_count_for_later_walls(self):
        grid = self._grid({(1, 1), (1, 3), (2, 3)})
        opened = MazeGenerator(1.0)._braid(grid, 5, 5, GameRNG(0))

        # (1, 2) joins (1, 1) and (1, 3); (2, 2) then sees (1, 2) and (2, 3)
        assert grid[2][1] == Tile.FLOOR
        assert grid[2][2] == Tile.FLOOR
        assert opened == 2

    def test_each_wall_considered_once(self):
        grid = self._grid({(1, 1), (1, 3), (2, 3)})
        MazeGenerator(1.0)._braid(grid, 5, 5, GameRNG(0))

        # (2, 1) had one floor neighbour on its turn and is not revisited
        assert grid[1][2] == Tile.WALL
        assert grid[2][3] == Tile.WALL
