"""Wall-clock sources used for save timestamps and offline decay."""
from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class WallClock(Protocol):
    """Supplies the current wall time in Unix seconds."""

    def now(self) -> float:
        ...


class SystemClock:
    def now(self) -> float:
        return time.time()


class ManualClock:
    """Deterministic wall clock for tests and offline-decay simulations."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> float:
        if seconds < 0:
            raise ValueError("wall time cannot move backwards")
        self._now += seconds
        return self._now

    def set(self, now: float) -> None:
        self._now = float(now)
