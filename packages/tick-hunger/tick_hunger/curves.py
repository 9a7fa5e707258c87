"""Derived values: pure functions of the hunger level.

Nothing here mutates state. Every function is total over [0, max_level];
levels outside that range are clamped before evaluation.
"""
from __future__ import annotations

import math

from tick_hunger.config import HungerConfig
from tick_hunger.types import Severity

Color = tuple[int, int, int]

PLATE_COLORS: dict[Severity, Color] = {
    Severity.FULL: (255, 255, 255),
    Severity.HUNGRY: (255, 217, 128),
    Severity.STARVING: (255, 153, 153),
}


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def movement_multiplier(level: float, config: HungerConfig) -> float:
    """Locomotion speed factor.

    1.0 above the hungry threshold, falling linearly to
    min_movement_multiplier as the level approaches 0. At exactly 0 the
    harsher starved_movement_multiplier applies instead of the curve's limit.
    """
    level = _clamp(level, 0.0, config.max_level)
    if level <= 0.0:
        return config.starved_movement_multiplier
    if level > config.hungry_threshold:
        return 1.0
    t = level / config.hungry_threshold
    return _lerp(config.min_movement_multiplier, 1.0, t)


def difficulty_multiplier(level: float, config: HungerConfig) -> float:
    """Task difficulty factor: 1.0 when fed, max_difficulty_multiplier when starving."""
    level = _clamp(level, 0.0, config.max_level)
    if level > config.hungry_threshold:
        return 1.0
    if level <= config.starving_threshold:
        return config.max_difficulty_multiplier
    span = config.hungry_threshold - config.starving_threshold
    t = (config.hungry_threshold - level) / span
    return _lerp(1.0, config.max_difficulty_multiplier, t)


def music_pitch(fraction: float, config: HungerConfig) -> float:
    """Ambient music pitch: lower fill gives a deeper sound."""
    return _lerp(config.starving_pitch, config.normal_pitch, _clamp(fraction, 0.0, 1.0))


def severity_pitch(severity: Severity, config: HungerConfig) -> float:
    """Pitch target on a severity edge. Hungry sits halfway."""
    if severity == Severity.FULL:
        return config.normal_pitch
    if severity == Severity.HUNGRY:
        return _lerp(config.normal_pitch, config.starving_pitch, 0.5)
    return config.starving_pitch


def plate_color(severity: Severity) -> Color:
    """HUD plate tint for a severity."""
    return PLATE_COLORS[severity]


def seconds_label(level: float) -> str:
    """HUD text: whole seconds remaining, rounded up."""
    return f"{math.ceil(max(0.0, level))}s"
