"""Tests for headless run simulation."""

from maze_escape.sim.config import GameConfig
from maze_escape.sim.runner import BatchRunner, simulate_run


class TestSimulateRun:
    def test_run_completes(self):
        telemetry = simulate_run(seed=1, max_steps=300)

        assert telemetry.seed == 1
        assert telemetry.steps == 300
        assert telemetry.final_level >= 1

    def test_deterministic(self):
        a = simulate_run(seed=7, max_steps=400)
        b = simulate_run(seed=7, max_steps=400)

        assert a == b

    def test_battles_recorded(self):
        config = GameConfig(maze_cols=9, maze_rows=9, monster_count=6)
        telemetry = simulate_run(seed=3, max_steps=1500, config=config)

        assert len(telemetry.battles) > 0
        for battle in telemetry.battles:
            assert battle.result in ("win", "loss")
            assert battle.turns >= 1


class TestBatchRunner:
    def test_sequential_batch(self):
        results = BatchRunner().run_batch(3, base_seed=10, max_steps=100)

        assert [r.seed for r in results] == [10, 11, 12]
