"""Tests for the cooperative TaskScheduler."""
from __future__ import annotations

import pytest

from tick_hunger import InvalidArgument, TaskScheduler


class TestSchedule:
    def test_fires_after_interval(self) -> None:
        s = TaskScheduler()
        fired = []
        s.schedule("t", 3.0, lambda: fired.append(1))
        s.advance(2.0)
        assert fired == []
        s.advance(1.0)
        assert fired == [1]

    def test_fire_now(self) -> None:
        s = TaskScheduler()
        fired = []
        task = s.schedule("t", 3.0, lambda: fired.append(1), fire_now=True)
        assert fired == [1]
        assert task.fire_count == 1
        s.advance(2.9)
        assert fired == [1]

    def test_large_dt_fires_once_per_interval(self) -> None:
        s = TaskScheduler()
        fired = []
        s.schedule("t", 3.0, lambda: fired.append(1))
        s.advance(10.0)
        assert len(fired) == 3
        assert s.get("t").elapsed == pytest.approx(1.0)

    def test_small_steps_absorb_float_drift(self) -> None:
        """30 x 0.1 lands on the 3.0 boundary."""
        s = TaskScheduler()
        fired = []
        s.schedule("t", 3.0, lambda: fired.append(1))
        for _ in range(30):
            s.advance(0.1)
        assert fired == [1]

    def test_same_name_replaces(self) -> None:
        s = TaskScheduler()
        fired = []
        old = s.schedule("t", 1.0, lambda: fired.append("old"))
        s.schedule("t", 1.0, lambda: fired.append("new"))
        s.advance(1.0)
        assert fired == ["new"]
        assert old.active is False

    @pytest.mark.parametrize("interval", [0.0, -1.0, float("inf"), float("nan")])
    def test_invalid_interval(self, interval: float) -> None:
        s = TaskScheduler()
        with pytest.raises(InvalidArgument):
            s.schedule("t", interval, lambda: None)


class TestCancel:
    def test_cancel_stops_firing(self) -> None:
        s = TaskScheduler()
        fired = []
        s.schedule("t", 1.0, lambda: fired.append(1))
        assert s.cancel("t") is True
        s.advance(5.0)
        assert fired == []
        assert not s.is_scheduled("t")

    def test_cancel_unknown(self) -> None:
        assert TaskScheduler().cancel("missing") is False

    def test_cancel_from_own_callback_stops_catch_up(self) -> None:
        """A task cancelled while catching up is never fired again."""
        s = TaskScheduler()
        fired = []

        def cb() -> None:
            fired.append(1)
            s.cancel("t")

        s.schedule("t", 1.0, cb)
        s.advance(5.0)
        assert fired == [1]

    def test_cancel_other_task_mid_advance(self) -> None:
        s = TaskScheduler()
        fired = []
        s.schedule("a", 1.0, lambda: (fired.append("a"), s.cancel("b")))
        s.schedule("b", 1.0, lambda: fired.append("b"))
        s.advance(1.0)
        assert fired == ["a"]

    def test_cancel_all(self) -> None:
        s = TaskScheduler()
        s.schedule("a", 1.0, lambda: None)
        s.schedule("b", 1.0, lambda: None)
        s.cancel_all()
        assert s.names() == []


class TestAdvance:
    def test_task_added_mid_advance_waits(self) -> None:
        s = TaskScheduler()
        fired = []

        def spawn() -> None:
            fired.append("a")
            s.schedule("b", 1.0, lambda: fired.append("b"))

        s.schedule("a", 10.0, spawn)
        s.advance(10.0)
        assert fired == ["a"]
        s.advance(1.0)
        assert fired == ["a", "b"]

    def test_zero_dt(self) -> None:
        s = TaskScheduler()
        fired = []
        s.schedule("t", 1.0, lambda: fired.append(1))
        s.advance(0.0)
        assert fired == []

    @pytest.mark.parametrize("dt", [-0.1, float("nan"), float("inf")])
    def test_invalid_dt(self, dt: float) -> None:
        with pytest.raises(InvalidArgument):
            TaskScheduler().advance(dt)
