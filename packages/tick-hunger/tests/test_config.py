"""Tests for HungerConfig validation and YAML loading."""
from __future__ import annotations

import dataclasses

import pytest

from tick_hunger import ConfigurationError, HungerConfig, config_from_dict, load_config


class TestDefaults:
    def test_default_values(self) -> None:
        c = HungerConfig()
        assert c.max_level == 300.0
        assert c.decay_rate == 1.0
        assert c.hungry_threshold == 120.0
        assert c.starving_threshold == 60.0
        assert c.starvation_tick_interval == 3.0
        assert c.min_movement_multiplier == 0.75
        assert c.starved_movement_multiplier == 0.25
        assert c.max_difficulty_multiplier == 1.4
        assert c.save_interval == 0.0
        assert c.level_key == "HungerSecondsRemaining"
        assert c.timestamp_key == "HungerLastSavedUnix"

    def test_frozen(self) -> None:
        c = HungerConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.max_level = 10.0  # type: ignore[misc]


class TestValidation:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_level": 0.0},
            {"decay_rate": -1.0},
            {"starving_threshold": -1.0},
            {"starving_threshold": 120.0},
            {"starving_threshold": 130.0},
            {"hungry_threshold": 300.0},
            {"hungry_threshold": 400.0},
            {"starvation_tick_interval": 0.0},
            {"save_interval": -5.0},
            {"min_movement_multiplier": 0.0},
            {"min_movement_multiplier": 1.5},
            {"starved_movement_multiplier": 0.9},
            {"max_difficulty_multiplier": 0.5},
            {"normal_pitch": 0.0},
            {"level_key": ""},
            {"timestamp_key": "HungerSecondsRemaining"},
            {"decay_rate": float("nan")},
            {"max_level": float("inf")},
            {"max_level": "300"},
            {"decay_rate": True},
        ],
    )
    def test_invalid_config_raises(self, kwargs: dict) -> None:
        with pytest.raises(ConfigurationError):
            HungerConfig(**kwargs)

    def test_zero_decay_rate_allowed(self) -> None:
        assert HungerConfig(decay_rate=0.0).decay_rate == 0.0

    def test_zero_starving_threshold_allowed(self) -> None:
        assert HungerConfig(starving_threshold=0.0).starving_threshold == 0.0

    def test_integers_accepted(self) -> None:
        c = HungerConfig(max_level=100, hungry_threshold=50, starving_threshold=20)
        assert c.max_level == 100


class TestConfigFromDict:
    def test_top_level_and_sections(self) -> None:
        c = config_from_dict({
            "max_level": 200,
            "decay_rate": 2.0,
            "hungry_threshold": 80,
            "starving_threshold": 30,
            "starvation_tick_interval": 5,
            "movement": {"min_multiplier": 0.5, "starved_multiplier": 0.1},
            "difficulty": {"max_multiplier": 2.0},
            "audio": {"normal_pitch": 1.1, "starving_pitch": 0.7},
            "persistence": {
                "save_interval": 10,
                "level_key": "lvl",
                "timestamp_key": "ts",
            },
        })
        assert c.max_level == 200
        assert c.decay_rate == 2.0
        assert c.min_movement_multiplier == 0.5
        assert c.starved_movement_multiplier == 0.1
        assert c.max_difficulty_multiplier == 2.0
        assert c.starving_pitch == 0.7
        assert c.save_interval == 10
        assert c.level_key == "lvl"
        assert c.timestamp_key == "ts"

    def test_empty_mapping_gives_defaults(self) -> None:
        assert config_from_dict({}) == HungerConfig()

    def test_unknown_top_level_key(self) -> None:
        with pytest.raises(ConfigurationError, match="unknown config key 'speed'"):
            config_from_dict({"speed": 3})

    def test_unknown_section_key(self) -> None:
        with pytest.raises(ConfigurationError, match="movement.max"):
            config_from_dict({"movement": {"max": 3}})

    def test_section_must_be_mapping(self) -> None:
        with pytest.raises(ConfigurationError):
            config_from_dict({"movement": 0.5})

    def test_document_must_be_mapping(self) -> None:
        with pytest.raises(ConfigurationError):
            config_from_dict([1, 2, 3])  # type: ignore[arg-type]


class TestLoadConfig:
    def test_none_returns_defaults(self) -> None:
        assert load_config(None) == HungerConfig()

    def test_load_yaml_file(self, tmp_path) -> None:
        path = tmp_path / "hunger.yaml"
        path.write_text(
            "max_level: 100\n"
            "hungry_threshold: 40\n"
            "starving_threshold: 10\n"
            "movement:\n"
            "  min_multiplier: 0.6\n",
            encoding="utf-8",
        )
        c = load_config(path)
        assert c.max_level == 100
        assert c.hungry_threshold == 40
        assert c.min_movement_multiplier == 0.6
        assert c.decay_rate == 1.0

    def test_empty_file_gives_defaults(self, tmp_path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == HungerConfig()

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ConfigurationError, match="cannot read"):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("max_level: [1, 2\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="invalid YAML"):
            load_config(path)

    def test_bad_thresholds_in_file(self, tmp_path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("hungry_threshold: 50\nstarving_threshold: 80\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="thresholds"):
            load_config(path)
