"""Tests for configuration validation and settings loading."""

import json

import pytest

from wordfall.config import ConfigError, GameConfig, load_config, parse_policy
from wordfall.models import FloorPolicy


def test_defaults_are_valid():
    config = GameConfig().validate()
    assert config.policy == FloorPolicy.STRICT
    assert config.start_speed == 1.3
    assert config.max_speed == 8.0


@pytest.mark.parametrize("overrides", [
    {"words": ()},
    {"words": ("ok", "NOPE")},
    {"start_speed": 0},
    {"max_speed": 0.5},
    {"speed_increment": -1},
    {"fall_interval_ms": 0},
    {"floor_y": -10},
])
def test_invalid_config(overrides):
    with pytest.raises(ConfigError):
        GameConfig(**overrides).validate()


def test_parse_policy():
    assert parse_policy("lenient") == FloorPolicy.LENIENT
    with pytest.raises(ConfigError):
        parse_policy("forgiving")


def test_missing_settings_file_gives_defaults(tmp_path):
    assert load_config(tmp_path / "none.json") == GameConfig()


def test_unreadable_settings_file_gives_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{{{")
    assert load_config(path) == GameConfig()


def test_settings_file_overrides(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({
        "game": {"words": ["alpha", "beta"], "policy": "lenient", "max_speed": 5, "colour": "red"},
    }))
    config = load_config(path)
    assert config.words == ("alpha", "beta")
    assert config.policy == FloorPolicy.LENIENT
    assert config.max_speed == 5


def test_bad_settings_values_raise(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"game": {"words": []}}))
    with pytest.raises(ConfigError):
        load_config(path)
