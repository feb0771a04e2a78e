"""Tests for the virtual-clock Scheduler."""

import pytest

from maze_escape.sim.core.scheduler import Scheduler


class TestSchedulerBasics:
    def test_callback_fires_when_due(self):
        scheduler = Scheduler()
        fired = []
        scheduler.schedule(1000, lambda: fired.append("a"))

        scheduler.advance(999)
        assert fired == []

        scheduler.advance(1)
        assert fired == ["a"]
        assert scheduler.now_ms == 1000

    def test_zero_delay_fires_on_zero_advance(self):
        scheduler = Scheduler()
        fired = []
        scheduler.schedule(0, lambda: fired.append("now"))

        assert scheduler.advance(0) == 1
        assert fired == ["now"]

    def test_negative_delay_rejected(self):
        with pytest.raises(ValueError):
            Scheduler().schedule(-1, lambda: None)

    def test_negative_advance_rejected(self):
        with pytest.raises(ValueError):
            Scheduler().advance(-5)

    def test_fires_in_due_order_then_schedule_order(self):
        scheduler = Scheduler()
        fired = []
        scheduler.schedule(500, lambda: fired.append("late"))
        scheduler.schedule(100, lambda: fired.append("early-1"))
        scheduler.schedule(100, lambda: fired.append("early-2"))

        scheduler.advance(1000)
        assert fired == ["early-1", "early-2", "late"]

    def test_clock_reads_due_time_inside_callback(self):
        scheduler = Scheduler()
        seen = []
        scheduler.schedule(300, lambda: seen.append(scheduler.now_ms))

        scheduler.advance(1000)
        assert seen == [300]
        assert scheduler.now_ms == 1000


class TestSchedulerCancellation:
    def test_cancelled_timer_never_fires(self):
        scheduler = Scheduler()
        fired = []
        handle = scheduler.schedule(100, lambda: fired.append("x"))

        assert handle.cancel() is True
        scheduler.advance(1000)

        assert fired == []
        assert scheduler.pending == 0

    def test_cancel_after_fire_returns_false(self):
        scheduler = Scheduler()
        handle = scheduler.schedule(10, lambda: None)
        scheduler.advance(10)

        assert handle.fired
        assert handle.cancel() is False

    def test_cancel_all(self):
        scheduler = Scheduler()
        fired = []
        scheduler.schedule(10, lambda: fired.append(1))
        scheduler.schedule(20, lambda: fired.append(2))
        scheduler.cancel_all()

        scheduler.advance(100)
        assert fired == []


class TestSchedulerChaining:
    def test_callback_scheduled_inside_window_fires(self):
        scheduler = Scheduler()
        fired = []

        def first():
            fired.append("first")
            scheduler.schedule(200, lambda: fired.append("second"))

        scheduler.schedule(100, first)
        scheduler.advance(300)

        assert fired == ["first", "second"]

    def test_callback_scheduled_past_window_waits(self):
        scheduler = Scheduler()
        fired = []
        scheduler.schedule(100, lambda: scheduler.schedule(500, lambda: fired.append("x")))

        scheduler.advance(300)
        assert fired == []
        assert scheduler.pending == 1
        assert scheduler.next_due_ms == 600

    def test_run_until_idle(self):
        scheduler = Scheduler()
        fired = []
        scheduler.schedule(1000, lambda: scheduler.schedule(1500, lambda: fired.append("done")))

        assert scheduler.run_until_idle() == 2
        assert fired == ["done"]
        assert scheduler.now_ms == 2500
        assert scheduler.next_due_ms is None
