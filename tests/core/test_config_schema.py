"""Tests for load-time config validation (moodmaster.core.config_schema)."""

import os

import pytest
import yaml

from moodmaster.core.config import Config
from moodmaster.core.config_schema import InsightsConfig, MoodMasterConfig
from moodmaster.core.exceptions import ConfigurationError


class TestMoodMasterConfig:
    def test_defaults(self):
        cfg = MoodMasterConfig()
        assert cfg.insights == InsightsConfig(sleep_min_hours=7, exercise_min_minutes=30, water_min_glasses=8)
        assert cfg.calendar.trend_window == 30
        assert cfg.logging.level == "WARNING"
        assert cfg.logging.file is None

    def test_string_numbers_coerced(self):
        cfg = MoodMasterConfig.model_validate({"insights": {"water_min_glasses": "6"}})
        assert cfg.insights.water_min_glasses == 6

    def test_log_level_normalized(self):
        cfg = MoodMasterConfig.model_validate({"logging": {"level": " debug "}})
        assert cfg.logging.level == "DEBUG"

    def test_extra_sections_allowed(self):
        cfg = MoodMasterConfig.model_validate({"plugins": {"enabled": True}})
        assert cfg.model_extra == {"plugins": {"enabled": True}}


class TestValidationOnLoad:
    def test_negative_env_threshold_rejected(self, monkeypatch):
        monkeypatch.setenv("MOODMASTER_INSIGHTS__WATER_MIN_GLASSES", "-3")
        with pytest.raises(ConfigurationError, match="insights.water_min_glasses"):
            Config()

    def test_non_numeric_env_threshold_rejected(self, monkeypatch):
        monkeypatch.setenv("MOODMASTER_INSIGHTS__WATER_MIN_GLASSES", "abc")
        with pytest.raises(ConfigurationError, match="insights.water_min_glasses"):
            Config()

    def test_negative_trend_window_in_file_rejected(self, tmp_dir):
        path = os.path.join(tmp_dir, "config.yaml")
        with open(path, "w") as f:
            yaml.dump({"calendar": {"trend_window": -1}}, f)

        with pytest.raises(ConfigurationError, match="calendar.trend_window"):
            Config(config_file=path, env_prefix="")

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ConfigurationError, match="logging.level"):
            Config(env_prefix="", defaults={"logging": {"level": "LOUD"}})

    def test_all_problems_reported(self):
        defaults = {"insights": {"sleep_min_hours": 30, "exercise_min_minutes": -1}}
        with pytest.raises(ConfigurationError) as exc_info:
            Config(env_prefix="", defaults=defaults)
        message = str(exc_info.value)
        assert "insights.sleep_min_hours" in message
        assert "insights.exercise_min_minutes" in message
