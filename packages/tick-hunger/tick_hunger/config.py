"""Hunger configuration dataclass and YAML loader."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from tick_hunger.types import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HungerConfig:
    """Immutable configuration for a hunger system. Loaded once at startup.

    Attributes:
        max_level: Level of a full plate, in simulated seconds (> 0).
        decay_rate: Level lost per simulated second (0 pauses decay).
        hungry_threshold: Levels at or below this are Hungry.
        starving_threshold: Levels at or below this are Starving.
        starvation_tick_interval: Seconds between StarvationTick signals.
        min_movement_multiplier: Movement multiplier as level approaches 0.
        starved_movement_multiplier: Movement multiplier at exactly 0.
        max_difficulty_multiplier: Task difficulty at or below starving_threshold.
        normal_pitch: Music pitch on a full plate.
        starving_pitch: Music pitch on an empty plate.
        save_interval: Seconds between throttled saves (0 saves every mutation).
        level_key: Store key for the level.
        timestamp_key: Store key for the Unix-seconds save timestamp.
    """

    max_level: float = 300.0
    decay_rate: float = 1.0
    hungry_threshold: float = 120.0
    starving_threshold: float = 60.0
    starvation_tick_interval: float = 3.0
    min_movement_multiplier: float = 0.75
    starved_movement_multiplier: float = 0.25
    max_difficulty_multiplier: float = 1.4
    normal_pitch: float = 1.0
    starving_pitch: float = 0.8
    save_interval: float = 0.0
    level_key: str = "HungerSecondsRemaining"
    timestamp_key: str = "HungerLastSavedUnix"

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name.endswith("_key"):
                if not isinstance(value, str) or not value:
                    raise ConfigurationError(f"{f.name} must be a non-empty string")
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"{f.name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ConfigurationError(f"{f.name} must be finite, got {value}")

        if self.max_level <= 0:
            raise ConfigurationError(f"max_level must be > 0, got {self.max_level}")
        if self.decay_rate < 0:
            raise ConfigurationError(f"decay_rate must be >= 0, got {self.decay_rate}")
        if not 0 <= self.starving_threshold < self.hungry_threshold < self.max_level:
            raise ConfigurationError(
                "thresholds must satisfy 0 <= starving_threshold < hungry_threshold "
                f"< max_level, got {self.starving_threshold}, "
                f"{self.hungry_threshold}, {self.max_level}"
            )
        if self.starvation_tick_interval <= 0:
            raise ConfigurationError(
                "starvation_tick_interval must be > 0, "
                f"got {self.starvation_tick_interval}"
            )
        if self.save_interval < 0:
            raise ConfigurationError(
                f"save_interval must be >= 0, got {self.save_interval}"
            )
        if not 0 < self.min_movement_multiplier <= 1:
            raise ConfigurationError(
                "min_movement_multiplier must be in (0, 1], "
                f"got {self.min_movement_multiplier}"
            )
        if not 0 <= self.starved_movement_multiplier <= self.min_movement_multiplier:
            raise ConfigurationError(
                "starved_movement_multiplier must be in [0, min_movement_multiplier], "
                f"got {self.starved_movement_multiplier}"
            )
        if self.max_difficulty_multiplier < 1:
            raise ConfigurationError(
                "max_difficulty_multiplier must be >= 1, "
                f"got {self.max_difficulty_multiplier}"
            )
        if self.normal_pitch <= 0 or self.starving_pitch <= 0:
            raise ConfigurationError("pitches must be > 0")
        if self.level_key == self.timestamp_key:
            raise ConfigurationError("level_key and timestamp_key must differ")


# YAML section -> {yaml key: HungerConfig field}
_SECTIONS: dict[str, dict[str, str]] = {
    "movement": {
        "min_multiplier": "min_movement_multiplier",
        "starved_multiplier": "starved_movement_multiplier",
    },
    "difficulty": {
        "max_multiplier": "max_difficulty_multiplier",
    },
    "audio": {
        "normal_pitch": "normal_pitch",
        "starving_pitch": "starving_pitch",
    },
    "persistence": {
        "save_interval": "save_interval",
        "level_key": "level_key",
        "timestamp_key": "timestamp_key",
    },
}

_TOP_LEVEL = (
    "max_level",
    "decay_rate",
    "hungry_threshold",
    "starving_threshold",
    "starvation_tick_interval",
)


def config_from_dict(raw: dict[str, Any]) -> HungerConfig:
    """Build a HungerConfig from a nested mapping (the YAML document shape)."""
    if not isinstance(raw, dict):
        raise ConfigurationError(
            f"config document must be a mapping, got {type(raw).__name__}"
        )
    kwargs: dict[str, Any] = {}
    for key, value in raw.items():
        if key in _TOP_LEVEL:
            kwargs[key] = value
        elif key in _SECTIONS:
            if not isinstance(value, dict):
                raise ConfigurationError(f"section '{key}' must be a mapping")
            mapping = _SECTIONS[key]
            for sub_key, sub_value in value.items():
                if sub_key not in mapping:
                    raise ConfigurationError(f"unknown config key '{key}.{sub_key}'")
                kwargs[mapping[sub_key]] = sub_value
        else:
            raise ConfigurationError(f"unknown config key '{key}'")
    return HungerConfig(**kwargs)


def load_config(path: str | Path | None = None) -> HungerConfig:
    """Load configuration from a YAML file. None returns the defaults."""
    if path is None:
        config = HungerConfig()
        logger.debug("Using default hunger config")
    else:
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        except OSError as exc:
            raise ConfigurationError(f"cannot read config {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"invalid YAML in {path}: {exc}") from exc
        config = config_from_dict(raw or {})
        logger.debug("Loaded hunger config from path: %s", path)

    logger.info(
        "Hunger config: max=%s hungry<=%s starving<=%s decay=%s/s",
        config.max_level,
        config.hungry_threshold,
        config.starving_threshold,
        config.decay_rate,
    )
    return config
