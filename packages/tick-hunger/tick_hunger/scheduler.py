"""Cooperative scheduler for periodic tasks driven by the host's step."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from tick_hunger.types import InvalidArgument

# Absorbs float drift from summing frame deltas (e.g. 30 x 0.1 != 3.0).
_EPSILON = 1e-9


@dataclass(eq=False)
class PeriodicTask:
    """Recurring task. Fires every `interval` simulated seconds until cancelled."""

    name: str
    interval: float
    callback: Callable[[], None]
    elapsed: float = 0.0
    active: bool = True
    fire_count: int = 0


class TaskScheduler:
    """Owns named periodic tasks. Cancelling means the task is never re-fired."""

    def __init__(self) -> None:
        self._tasks: dict[str, PeriodicTask] = {}

    # --- Registration ---

    def schedule(
        self,
        name: str,
        interval: float,
        callback: Callable[[], None],
        fire_now: bool = False,
    ) -> PeriodicTask:
        """Register a task, replacing any task with the same name."""
        if not interval > 0 or not math.isfinite(interval):
            raise InvalidArgument(f"interval must be > 0, got {interval}")
        self.cancel(name)
        task = PeriodicTask(name=name, interval=interval, callback=callback)
        self._tasks[name] = task
        if fire_now:
            self._fire(task)
        return task

    def cancel(self, name: str) -> bool:
        """Deactivate a task. Returns False if nothing was scheduled."""
        task = self._tasks.pop(name, None)
        if task is None:
            return False
        task.active = False
        return True

    def cancel_all(self) -> None:
        for name in list(self._tasks):
            self.cancel(name)

    # --- Queries ---

    def is_scheduled(self, name: str) -> bool:
        return name in self._tasks

    def get(self, name: str) -> PeriodicTask | None:
        return self._tasks.get(name)

    def names(self) -> list[str]:
        return list(self._tasks)

    # --- Stepping ---

    def advance(self, dt: float) -> None:
        """Add dt seconds to every task and fire each due interval once.

        A dt spanning several intervals fires once per interval. Tasks added
        during this call start counting on the next advance.
        """
        if dt < 0 or not math.isfinite(dt):
            raise InvalidArgument(f"dt must be >= 0, got {dt}")
        for task in list(self._tasks.values()):
            if not task.active:
                continue
            task.elapsed += dt
            while task.active and task.elapsed + _EPSILON >= task.interval:
                task.elapsed -= task.interval
                self._fire(task)

    def _fire(self, task: PeriodicTask) -> None:
        task.fire_count += 1
        task.callback()
