"""Pydantic models for config validation.

``Config`` validates its merged ``config_data`` against ``MoodMasterConfig``
when it loads, so a bad threshold in a file or an env var fails right away
instead of at the first read.  Env overrides arrive as strings; pydantic's
lax mode coerces ``"6"`` to ``6``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class InsightsConfig(BaseModel):
    """Cut-offs for the daily insight rules."""

    sleep_min_hours: int = Field(7, ge=0, le=24)
    exercise_min_minutes: int = Field(30, ge=0)
    water_min_glasses: int = Field(8, ge=0)


class CalendarConfig(BaseModel):
    """Calendar screen settings."""

    trend_window: int = Field(30, ge=0)


class LoggingConfig(BaseModel):
    """loguru sink settings."""

    level: str = "WARNING"
    file: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _known_level(cls, v: object) -> object:
        if isinstance(v, str):
            v = v.strip().upper()
            if v not in _LOG_LEVELS:
                raise ValueError(f"must be one of {', '.join(_LOG_LEVELS)}")
        return v


class MoodMasterConfig(BaseModel):
    """Root configuration model.

    Uses ``extra="allow"`` so consumers can bolt on custom sections
    without touching this schema.
    """

    model_config = ConfigDict(extra="allow")

    insights: InsightsConfig = InsightsConfig()
    calendar: CalendarConfig = CalendarConfig()
    logging: LoggingConfig = LoggingConfig()
