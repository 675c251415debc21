"""Tests for moodmaster.core.config."""

import json
import os

import pytest
import yaml

from moodmaster.core.config import Config
from moodmaster.core.exceptions import ConfigurationError


class TestConfig:
    def test_defaults(self):
        config = Config(env_prefix="")
        assert config.get("insights.sleep_min_hours") == 7
        assert config.get("insights.exercise_min_minutes") == 30
        assert config.get("insights.water_min_glasses") == 8
        assert config.get("calendar.trend_window") == 30
        assert config.get("logging.level") == "WARNING"

    def test_yaml_config_file(self, tmp_config_file):
        config = Config(config_file=tmp_config_file, env_prefix="")
        assert config.get("insights.sleep_min_hours") == 8
        assert config.get("insights.water_min_glasses") == 6
        # Untouched keys keep their defaults
        assert config.get("insights.exercise_min_minutes") == 30

    def test_json_config_file(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.json")
        with open(config_path, "w") as f:
            json.dump({"calendar": {"trend_window": 14}}, f)

        config = Config(config_file=config_path, env_prefix="")
        assert config.settings.calendar.trend_window == 14

    def test_missing_config_file_is_ignored(self, tmp_dir):
        config = Config(config_file=os.path.join(tmp_dir, "nope.yaml"), env_prefix="")
        assert config.get("calendar.trend_window") == 30

    def test_non_mapping_file_raises(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.yaml")
        with open(config_path, "w") as f:
            yaml.dump(["a", "b"], f)

        with pytest.raises(ConfigurationError, match="mapping"):
            Config(config_file=config_path)

    def test_env_overrides_file(self, tmp_config_file, monkeypatch):
        monkeypatch.setenv("MOODMASTER_INSIGHTS__SLEEP_MIN_HOURS", "6")
        config = Config(config_file=tmp_config_file)
        assert config.get("insights.sleep_min_hours") == "6"
        assert config.settings.insights.sleep_min_hours == 6

    def test_custom_env_prefix(self, monkeypatch):
        monkeypatch.setenv("MYAPP_LOGGING__LEVEL", "DEBUG")
        config = Config(env_prefix="MYAPP_")
        assert config.settings.logging.level == "DEBUG"

    def test_get_missing_key(self):
        config = Config(env_prefix="")
        assert config.get("nonexistent.key") is None
        assert config.get("nonexistent.key", "fallback") == "fallback"

    def test_extra_defaults(self):
        config = Config(env_prefix="", defaults={"insights": {"water_min_glasses": 10}})
        assert config.settings.insights.water_min_glasses == 10
        assert config.settings.insights.sleep_min_hours == 7

    def test_extra_sections_kept(self):
        config = Config(env_prefix="", defaults={"custom": {"nested": {"value": 42}}})
        assert config.get("custom.nested.value") == 42
