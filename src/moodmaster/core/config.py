"""
Hierarchical configuration management.

Loads configuration from multiple sources with this precedence (highest wins):
    1. Environment variables (PREFIX_SECTION__KEY)
    2. Config file (YAML or JSON)
    3. Built-in defaults (the ``MoodMasterConfig`` field defaults)

The merged mapping is validated against ``MoodMasterConfig`` on load and the
typed result is kept on ``Config.settings``.

Usage:
    config = Config(config_file="moodmaster.yaml")

    config.settings.insights.sleep_min_hours   # typed, validated
    config.get("logging.level")                # raw dot-notation access
"""

import json
import os
from typing import Any

import yaml
from pydantic import ValidationError

from .config_schema import MoodMasterConfig
from .exceptions import ConfigurationError

_DEFAULT_ENV_PREFIX = "MOODMASTER_"


class Config:
    """
    Central configuration manager.

    Env vars use double-underscore to denote nesting:
    MOODMASTER_INSIGHTS__WATER_MIN_GLASSES=6 -> config["insights"]["water_min_glasses"] = "6"

    Raises:
        ConfigurationError: if the file is unreadable as a mapping or any
            value fails schema validation.
    """

    def __init__(
        self,
        config_file: str | None = None,
        env_prefix: str = _DEFAULT_ENV_PREFIX,
        defaults: dict[str, Any] | None = None,
    ):
        """
        Args:
            config_file: Path to YAML or JSON configuration file.
            env_prefix: Prefix for environment variable overrides.
            defaults: Additional default values to merge (consumer-specific).
        """
        self.config_file = config_file
        self.env_prefix = env_prefix or ""
        self._extra_defaults = defaults or {}
        self.config_data: dict[str, Any] = {}

        self._load_config()
        self.settings = self.validated()

    def _load_config(self) -> None:
        self.config_data = MoodMasterConfig().model_dump()

        if self._extra_defaults:
            self._update_dict(self.config_data, self._extra_defaults)

        if self.config_file and os.path.exists(self.config_file):
            self._update_dict(self.config_data, self._load_file(self.config_file))

        # Env vars override everything
        self._load_from_env()

    @staticmethod
    def _load_file(path: str) -> dict[str, Any]:
        """Load a YAML or JSON config file."""
        ext = os.path.splitext(path)[1].lower()
        with open(path) as f:
            if ext in (".yaml", ".yml"):
                data = yaml.safe_load(f) or {}
            elif ext == ".json":
                data = json.load(f)
            else:
                return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping at the top level")
        return data

    def _update_dict(self, target: dict, source: dict) -> None:
        """Recursively merge source into target."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._update_dict(target[key], value)
            else:
                target[key] = value

    def _load_from_env(self) -> None:
        if not self.env_prefix:
            return
        for env_key, env_value in os.environ.items():
            if not env_key.startswith(self.env_prefix):
                continue
            key_parts = env_key[len(self.env_prefix) :].lower().split("__")

            current = self.config_data
            for part in key_parts[:-1]:
                if not isinstance(current.get(part), dict):
                    current[part] = {}
                current = current[part]
            current[key_parts[-1]] = env_value

    def validated(self) -> MoodMasterConfig:
        """Validate ``config_data`` and return the typed model."""
        try:
            return MoodMasterConfig.model_validate(self.config_data)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise ConfigurationError(f"Invalid configuration: {problems}") from e

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a raw config value by dot-notation path.

        Args:
            key_path: e.g. "insights.sleep_min_hours", "logging.level"
            default: Returned when key is not found.
        """
        current = self.config_data
        for part in key_path.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current
