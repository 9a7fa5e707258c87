"""HungerSystem - decay loop, command surface, and notifications.

The host constructs a HungerSystem, subscribes its collaborators on
``system.bus``, calls ``start()`` once, then ``step(dt)`` once per frame.

Mutation order for every command:
1. level is clamped and stored, severity recomputed (never stale)
2. the starvation ticker is cancelled if severity left Starving
3. LevelChanged is published
4. SeverityChanged is published on an edge (or when forced)
5. the starvation ticker starts if Starving was announced and none is running
6. the record is persisted (or marked dirty when saves are throttled)

A handler that mutates the system from inside a notification takes over the
remaining steps; the outer call publishes nothing further.
"""
from __future__ import annotations

import logging
import math

from tick_hunger import curves
from tick_hunger.bus import SignalBus
from tick_hunger.classify import SeverityTracker, classify
from tick_hunger.clock import SystemClock, WallClock
from tick_hunger.config import HungerConfig
from tick_hunger.reconcile import Reconciliation, reconcile, write_record
from tick_hunger.scheduler import TaskScheduler
from tick_hunger.store import MemoryStore, PersistenceStore
from tick_hunger.types import (
    LEVEL_CHANGED,
    SEVERITY_CHANGED,
    STARVATION_TICK,
    InvalidArgument,
    NotStartedError,
    PersistenceWriteError,
    ResourceProvider,
    Severity,
)

logger = logging.getLogger(__name__)

STARVATION_TASK = "hunger.starvation_tick"
AUTOSAVE_TASK = "hunger.autosave"


class HungerSystem:
    """Single decaying sustenance level with severity edges and persistence.

    Single-writer: callers serialize tick/add_time/set_level/step. Delivery
    is synchronous and re-entrant but not thread-safe.
    """

    def __init__(
        self,
        config: HungerConfig | None = None,
        store: PersistenceStore | None = None,
        clock: WallClock | None = None,
        bus: SignalBus | None = None,
        scheduler: TaskScheduler | None = None,
    ) -> None:
        self._config = config if config is not None else HungerConfig()
        self._store = store if store is not None else MemoryStore()
        self._clock = clock if clock is not None else SystemClock()
        self._bus = bus if bus is not None else SignalBus()
        self._scheduler = scheduler if scheduler is not None else TaskScheduler()
        # Tracks the last *announced* severity; _severity always matches level.
        self._tracker = SeverityTracker(
            self._config.hungry_threshold, self._config.starving_threshold
        )
        self._level: float | None = None
        self._severity: Severity | None = None
        self._revision = 0
        self._dirty = False
        self._shut_down = False
        self._reconciliation: Reconciliation | None = None

    # --- Accessors ---

    @property
    def config(self) -> HungerConfig:
        return self._config

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def scheduler(self) -> TaskScheduler:
        return self._scheduler

    @property
    def store(self) -> PersistenceStore:
        return self._store

    @property
    def started(self) -> bool:
        """False until start() has produced a valid level."""
        return self._level is not None

    @property
    def reconciliation(self) -> Reconciliation | None:
        return self._reconciliation

    @property
    def provider(self) -> ResourceProvider:
        """This system, typed as the read-only display capability."""
        return self

    @property
    def dirty(self) -> bool:
        """True when the in-memory level has not been written yet."""
        return self._dirty

    # --- Lifecycle ---

    def start(self) -> Reconciliation:
        """Reconcile against the store and announce the initial state once."""
        if self.started:
            raise RuntimeError("HungerSystem already started")
        if self._shut_down:
            raise RuntimeError("HungerSystem has been shut down")
        result = reconcile(self._store, self._clock.now(), self._config)
        self._reconciliation = result
        if self._config.save_interval > 0:
            self._scheduler.schedule(
                AUTOSAVE_TASK, self._config.save_interval, self._autosave
            )
        self._apply(result.level, force_level=True, force_severity=True)
        return result

    def step(self, dt: float) -> None:
        """Per-frame entry point: run due scheduled tasks, then decay by dt."""
        if self._shut_down:
            return
        self._check_delta(dt)
        self._require_started()
        self._scheduler.advance(dt)
        self.tick(dt)

    def flush(self) -> bool:
        """Persist now regardless of throttling. Returns False if the write failed."""
        self._require_started()
        return self.save()

    def shutdown(self) -> None:
        """Final save and cancel scheduled work.

        Afterwards step() and every command are no-ops; queries still answer.
        """
        if self._shut_down:
            return
        self._shut_down = True
        self._scheduler.cancel(STARVATION_TASK)
        self._scheduler.cancel(AUTOSAVE_TASK)
        if self.started:
            self.save()

    # --- Commands ---

    def tick(self, delta_seconds: float) -> None:
        """Decay by delta_seconds * decay_rate. A zero delta changes nothing."""
        self._check_delta(delta_seconds)
        self._require_started()
        if delta_seconds == 0 or self._config.decay_rate == 0:
            return
        self._apply(self._level - delta_seconds * self._config.decay_rate)  # type: ignore[operator]

    def add_time(self, seconds: float) -> None:
        """Restore sustenance (eating). Non-positive amounts are ignored."""
        self._require_started()
        if not seconds > 0:
            return
        self._apply(self._level + seconds)  # type: ignore[operator]

    def set_level(self, seconds: float) -> None:
        """Administrative override. Always re-announces the level."""
        self._require_started()
        if math.isnan(seconds):
            raise InvalidArgument("level must be a number, got nan")
        self._apply(seconds, force_level=True)

    def reset_to_full(self) -> None:
        """Debug reset. Re-announces both level and severity."""
        self._require_started()
        self._apply(self._config.max_level, force_level=True, force_severity=True)

    # --- Queries ---

    def get_level(self) -> float:
        self._require_started()
        return self._level  # type: ignore[return-value]

    def get_fill_fraction(self) -> float:
        self._require_started()
        return max(0.0, min(1.0, self._level / self._config.max_level))  # type: ignore[operator]

    def get_severity(self) -> Severity:
        self._require_started()
        return self._severity  # type: ignore[return-value]

    def get_severity_label(self) -> str:
        return self.get_severity().label

    def is_starving(self) -> bool:
        return self.get_severity() == Severity.STARVING

    def movement_multiplier(self) -> float:
        return curves.movement_multiplier(self.get_level(), self._config)

    def difficulty_multiplier(self) -> float:
        return curves.difficulty_multiplier(self.get_level(), self._config)

    def music_pitch(self) -> float:
        return curves.music_pitch(self.get_fill_fraction(), self._config)

    # --- Persistence ---

    def save(self) -> bool:
        """Write the current record. Failures are logged, never raised."""
        if self._level is None:
            return False
        try:
            write_record(self._store, self._config, self._level, self._clock.now())
        except PersistenceWriteError as exc:
            logger.warning("Hunger save failed, keeping in-memory state: %s", exc)
            self._dirty = True
            return False
        self._dirty = False
        logger.debug("Saved hunger level %s", self._level)
        return True

    def _persist(self) -> None:
        if self._config.save_interval > 0:
            self._dirty = True
        else:
            self.save()

    def _autosave(self) -> None:
        if self._dirty:
            self.save()

    # --- Internal ---

    def _require_started(self) -> None:
        if self._level is None:
            raise NotStartedError("HungerSystem.start() has not been called")

    @staticmethod
    def _check_delta(dt: float) -> None:
        if not math.isfinite(dt) or dt < 0:
            raise InvalidArgument(f"delta_seconds must be >= 0, got {dt}")

    def _apply(
        self, level: float, force_level: bool = False, force_severity: bool = False
    ) -> None:
        if self._shut_down:
            return
        cfg = self._config
        level = max(0.0, min(level, cfg.max_level))
        changed = level != self._level
        if not (changed or force_level or force_severity):
            return

        self._revision += 1
        revision = self._revision
        self._level = level
        self._severity = classify(level, cfg.hungry_threshold, cfg.starving_threshold)
        if self._severity != Severity.STARVING:
            self._stop_starvation_ticker()

        if changed or force_level:
            self._bus.publish(LEVEL_CHANGED, fraction=self.get_fill_fraction())
            if self._revision != revision:
                return

        edge = self._tracker.update(level, force=force_severity)
        if edge is not None:
            logger.info("Hunger severity -> %s (level %.1f)", edge.label, level)
            self._bus.publish(SEVERITY_CHANGED, severity=edge)
            # A nested command may have moved the level without an edge of
            # its own, so the ticker follows the current severity.
            self._ensure_starvation_ticker()
            if self._revision != revision:
                return

        self._persist()

    def _ensure_starvation_ticker(self) -> None:
        if (
            self._severity == Severity.STARVING
            and self._tracker.current == Severity.STARVING
            and not self._shut_down
            and not self._scheduler.is_scheduled(STARVATION_TASK)
        ):
            self._start_starvation_ticker()

    def _start_starvation_ticker(self) -> None:
        logger.debug("Starvation ticker started")
        self._scheduler.schedule(
            STARVATION_TASK,
            self._config.starvation_tick_interval,
            self._on_starvation_tick,
            fire_now=True,
        )

    def _stop_starvation_ticker(self) -> None:
        if self._scheduler.cancel(STARVATION_TASK):
            logger.debug("Starvation ticker stopped")

    def _on_starvation_tick(self) -> None:
        if self._severity != Severity.STARVING or self._shut_down:
            self._stop_starvation_ticker()
            return
        self._bus.publish(STARVATION_TICK)
