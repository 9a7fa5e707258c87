"""Shared types, signal names, and the error taxonomy for tick-hunger."""
from __future__ import annotations

from enum import IntEnum
from typing import Protocol, runtime_checkable

# Signal names published on the SignalBus.
LEVEL_CHANGED = "level_changed"  # data: fraction (float in [0, 1])
SEVERITY_CHANGED = "severity_changed"  # data: severity (Severity)
STARVATION_TICK = "starvation_tick"  # data: none


class Severity(IntEnum):
    """Hunger bucket. Higher rank is more severe."""

    FULL = 0
    HUNGRY = 1
    STARVING = 2

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Severity.FULL: "Full",
    Severity.HUNGRY: "Hungry",
    Severity.STARVING: "Starving",
}


@runtime_checkable
class ResourceProvider(Protocol):
    """Read-only capability handed to collaborators that only display hunger."""

    def get_severity_label(self) -> str:
        ...

    def get_fill_fraction(self) -> float:
        ...


class HungerError(Exception):
    """Base class for tick-hunger errors."""


class ConfigurationError(HungerError, ValueError):
    """Raised at startup for invalid thresholds, rates, or config files."""


class InvalidArgument(HungerError, ValueError):
    """Raised when a runtime argument would break the level bounds."""


class PersistenceError(HungerError):
    """Base class for persistence store failures."""


class PersistenceReadError(PersistenceError):
    """Store unreadable or record corrupt. Recovered by the first-run path."""


class PersistenceWriteError(PersistenceError):
    """Store unwritable. Non-fatal: in-memory state stays authoritative."""


class NotStartedError(HungerError, RuntimeError):
    """Raised when the hunger system is used before start()."""
