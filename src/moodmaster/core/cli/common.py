"""Shared setup logic for CLI commands."""

from __future__ import annotations

import click

from moodmaster.core.config import Config
from moodmaster.core.exceptions import ConfigurationError, DataSourceError
from moodmaster.core.utils.logging import setup_logging
from moodmaster.tracking.models import ActivityRecord
from moodmaster.tracking.sources import YamlFileSource


def load_config(config_file: str | None = None) -> Config:
    """Load config and apply its logging settings."""
    try:
        config = Config(config_file=config_file)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e
    setup_logging(level=config.settings.logging.level, log_file=config.settings.logging.file)
    return config


def load_records(path: str) -> list[ActivityRecord]:
    """Read every record in a YAML records file, or exit with the error."""
    try:
        return YamlFileSource(path).fetch_all()
    except DataSourceError as e:
        raise click.ClickException(str(e)) from e
