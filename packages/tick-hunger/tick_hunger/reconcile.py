"""Startup reconciliation: turn the saved record into an initial level.

Accounts for wall time that passed while the process was not running
("offline decay") and tells a first run, a legacy or corrupt save, and a
normal resume apart.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum

from tick_hunger.config import HungerConfig
from tick_hunger.store import PersistenceStore
from tick_hunger.types import PersistenceReadError, PersistenceWriteError

logger = logging.getLogger(__name__)


class ReconcileCase(Enum):
    FIRST_RUN = "first_run"  # no record
    UNREADABLE = "unreadable"  # store or record could not be read
    LEGACY_RESET = "legacy_reset"  # level <= 0 with no timestamp
    OFFLINE_DECAY = "offline_decay"  # timestamped record, decayed by elapsed time
    LEGACY_RESUME = "legacy_resume"  # level > 0 with no timestamp, used as-is


@dataclass(frozen=True)
class PersistedRecord:
    """On-disk shape: level plus integer Unix-seconds timestamp (None if absent)."""

    level: float
    saved_at: int | None = None


@dataclass(frozen=True)
class Reconciliation:
    """Outcome of reconcile(). `record` is what was read, if anything."""

    level: float
    case: ReconcileCase
    record: PersistedRecord | None = None
    elapsed: float = 0.0


def _clamp(level: float, max_level: float) -> float:
    return max(0.0, min(level, max_level))


def _parse_timestamp(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        value = int(raw)
    except ValueError:
        try:
            value = int(float(raw))
        except (ValueError, OverflowError):
            logger.debug("Ignoring malformed save timestamp %r", raw)
            return None
    return value if value > 0 else None


def read_record(store: PersistenceStore, config: HungerConfig) -> PersistedRecord | None:
    """Read the saved record. None means no record exists.

    Raises PersistenceReadError if the store fails or the level is not a
    finite number. A missing or malformed timestamp is not an error; it
    yields saved_at=None.
    """
    try:
        if not store.has(config.level_key):
            return None
        raw_level = store.get(config.level_key)
        raw_ts = (
            store.get(config.timestamp_key)
            if store.has(config.timestamp_key)
            else None
        )
    except OSError as exc:
        raise PersistenceReadError(f"store read failed: {exc}") from exc

    try:
        level = float(raw_level)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise PersistenceReadError(f"saved level {raw_level!r} is not a number") from exc
    if not math.isfinite(level):
        raise PersistenceReadError(f"saved level {raw_level!r} is not finite")
    return PersistedRecord(level=level, saved_at=_parse_timestamp(raw_ts))


def write_record(
    store: PersistenceStore, config: HungerConfig, level: float, now: float
) -> PersistedRecord:
    """Write level and floor(now) under the configured keys, then flush.

    Raises PersistenceWriteError if the store fails.
    """
    record = PersistedRecord(level=float(level), saved_at=math.floor(now))
    try:
        store.set(config.level_key, repr(record.level))
        store.set(config.timestamp_key, str(record.saved_at))
        store.flush()
    except OSError as exc:
        raise PersistenceWriteError(f"store write failed: {exc}") from exc
    return record


def _write_fresh(store: PersistenceStore, config: HungerConfig, level: float, now: float) -> None:
    try:
        write_record(store, config, level, now)
    except PersistenceWriteError as exc:
        logger.warning("Could not persist initial hunger record: %s", exc)


def reconcile(store: PersistenceStore, now: float, config: HungerConfig) -> Reconciliation:
    """Compute the starting level from the store and the current wall time."""
    try:
        record = read_record(store, config)
    except PersistenceReadError as exc:
        logger.warning("Hunger record unreadable, starting full: %s", exc)
        _write_fresh(store, config, config.max_level, now)
        return Reconciliation(level=config.max_level, case=ReconcileCase.UNREADABLE)

    if record is None:
        logger.info("No hunger record, first run: starting full")
        _write_fresh(store, config, config.max_level, now)
        return Reconciliation(level=config.max_level, case=ReconcileCase.FIRST_RUN)

    if record.saved_at is None:
        if record.level <= 0:
            # Pre-timestamp saves could store 0 by mistake; not a starved player.
            logger.info("Legacy hunger record (level=%s, no timestamp): resetting", record.level)
            _write_fresh(store, config, config.max_level, now)
            return Reconciliation(
                level=config.max_level, case=ReconcileCase.LEGACY_RESET, record=record
            )
        level = _clamp(record.level, config.max_level)
        logger.info("Legacy hunger record without timestamp: resuming at %s", level)
        return Reconciliation(level=level, case=ReconcileCase.LEGACY_RESUME, record=record)

    # Timestamps have whole-second resolution; compare like with like.
    elapsed = float(max(0, math.floor(now) - record.saved_at))
    level = _clamp(record.level - elapsed * config.decay_rate, config.max_level)
    logger.info(
        "Resuming hunger: saved=%s elapsed=%.0fs -> %s", record.level, elapsed, level
    )
    return Reconciliation(
        level=level, case=ReconcileCase.OFFLINE_DECAY, record=record, elapsed=elapsed
    )
