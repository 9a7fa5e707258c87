"""tick-hunger - Decaying sustenance resource with severity edges and offline decay."""
from __future__ import annotations

from tick_hunger.bus import SignalBus
from tick_hunger.classify import SeverityTracker, classify
from tick_hunger.clock import ManualClock, SystemClock, WallClock
from tick_hunger.config import HungerConfig, config_from_dict, load_config
from tick_hunger.curves import (
    difficulty_multiplier,
    movement_multiplier,
    music_pitch,
    plate_color,
    seconds_label,
    severity_pitch,
)
from tick_hunger.engine import HungerSystem
from tick_hunger.logs import configure_logging
from tick_hunger.reconcile import (
    PersistedRecord,
    ReconcileCase,
    Reconciliation,
    read_record,
    reconcile,
    write_record,
)
from tick_hunger.scheduler import PeriodicTask, TaskScheduler
from tick_hunger.store import JsonFileStore, MemoryStore, PersistenceStore, default_store_path
from tick_hunger.types import (
    LEVEL_CHANGED,
    SEVERITY_CHANGED,
    STARVATION_TICK,
    ConfigurationError,
    HungerError,
    InvalidArgument,
    NotStartedError,
    PersistenceError,
    PersistenceReadError,
    PersistenceWriteError,
    ResourceProvider,
    Severity,
)

__all__ = [
    "ConfigurationError",
    "HungerConfig",
    "HungerError",
    "HungerSystem",
    "InvalidArgument",
    "JsonFileStore",
    "LEVEL_CHANGED",
    "ManualClock",
    "MemoryStore",
    "NotStartedError",
    "PeriodicTask",
    "PersistedRecord",
    "PersistenceError",
    "PersistenceReadError",
    "PersistenceStore",
    "PersistenceWriteError",
    "ReconcileCase",
    "Reconciliation",
    "ResourceProvider",
    "SEVERITY_CHANGED",
    "STARVATION_TICK",
    "Severity",
    "SeverityTracker",
    "SignalBus",
    "SystemClock",
    "TaskScheduler",
    "WallClock",
    "classify",
    "config_from_dict",
    "configure_logging",
    "default_store_path",
    "difficulty_multiplier",
    "load_config",
    "movement_multiplier",
    "music_pitch",
    "plate_color",
    "read_record",
    "reconcile",
    "seconds_label",
    "severity_pitch",
    "write_record",
]
