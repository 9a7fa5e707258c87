"""Severity classification and edge detection."""
from __future__ import annotations

from tick_hunger.types import InvalidArgument, Severity


def classify(level: float, hungry_threshold: float, starving_threshold: float) -> Severity:
    """Map a level to its severity. Thresholds are inclusive for the worse bucket."""
    if not starving_threshold < hungry_threshold:
        raise InvalidArgument(
            "starving_threshold must be < hungry_threshold, "
            f"got {starving_threshold} and {hungry_threshold}"
        )
    if level <= starving_threshold:
        return Severity.STARVING
    if level <= hungry_threshold:
        return Severity.HUNGRY
    return Severity.FULL


class SeverityTracker:
    """Caches the last severity and reports only boundary crossings."""

    def __init__(self, hungry_threshold: float, starving_threshold: float) -> None:
        self._hungry = hungry_threshold
        self._starving = starving_threshold
        self._current: Severity | None = None

    @property
    def current(self) -> Severity | None:
        """Last classified severity, None before the first update."""
        return self._current

    def classify(self, level: float) -> Severity:
        return classify(level, self._hungry, self._starving)

    def update(self, level: float, force: bool = False) -> Severity | None:
        """Reclassify. Returns the new severity on an edge (or when forced), else None."""
        nxt = self.classify(level)
        if force or nxt != self._current:
            self._current = nxt
            return nxt
        return None
