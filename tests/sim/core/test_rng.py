"""Tests for GameRNG determinism and forking."""

import pytest

from maze_escape.sim.core.rng import GameRNG


class TestGameRNG:
    def test_same_seed_same_sequence(self):
        a, b = GameRNG(7), GameRNG(7)
        assert [a.random_int(0, 100) for _ in range(20)] == [
            b.random_int(0, 100) for _ in range(20)
        ]

    def test_random_int_inclusive_bounds(self):
        rng = GameRNG(1)
        values = {rng.random_int(1, 3) for _ in range(200)}
        assert values == {1, 2, 3}

    def test_random_choice_empty_raises(self):
        with pytest.raises(ValueError):
            GameRNG(1).random_choice([])

    def test_chance_extremes(self):
        rng = GameRNG(3)
        assert not any(rng.chance(0.0) for _ in range(100))
        assert all(rng.chance(1.0) for _ in range(100))

    def test_fork_is_deterministic_and_independent(self):
        parent = GameRNG(42)
        maze_a = parent.fork("maze")
        maze_b = GameRNG(42).fork("maze")
        loot = parent.fork("loot")

        assert maze_a.seed == maze_b.seed
        assert maze_a.seed != loot.seed

    def test_fork_unaffected_by_parent_consumption(self):
        parent = GameRNG(42)
        before = parent.fork("maze").seed
        parent.random_float()
        assert parent.fork("maze").seed == before

    def test_fork_path_matches_joined_key(self):
        rng = GameRNG(42)
        assert rng.fork("attempt-1", "level-2").seed != rng.fork("attempt-2", "level-1").seed
        assert rng.fork("attempt-1", "level-2").seed == GameRNG(42).fork("attempt-1", "level-2").seed

    def test_interior_cell_stays_off_border(self):
        rng = GameRNG(9)
        for _ in range(500):
            x, y = rng.interior_cell(7, 5)
            assert 1 <= x <= 5
            assert 1 <= y <= 3
