"""Tests for GameConfig and JSON loading."""

import json

import pytest
from pydantic import ValidationError

from maze_escape.sim.config import DEFAULT_CONFIG, GameConfig, load_config


class TestGameConfig:
    def test_defaults(self):
        assert DEFAULT_CONFIG.maze_cols == 20
        assert DEFAULT_CONFIG.maze_rows == 15
        assert DEFAULT_CONFIG.heal_mp_cost == 10
        assert DEFAULT_CONFIG.inventory_capacity == 3

    def test_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_CONFIG.maze_cols = 30

    def test_maze_minimum_enforced(self):
        with pytest.raises(ValidationError):
            GameConfig(maze_cols=4)

    def test_braid_probability_bounds(self):
        with pytest.raises(ValidationError):
            GameConfig(braid_probability=1.5)


class TestLoadConfig:
    def test_partial_override(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"monster_count": 8, "heal_amount": 40}))
        config = load_config(path)

        assert config.monster_count == 8
        assert config.heal_amount == 40
        assert config.chest_count == DEFAULT_CONFIG.chest_count

    def test_invalid_value_rejected(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"monster_count": -1}))

        with pytest.raises(ValidationError):
            load_config(path)
