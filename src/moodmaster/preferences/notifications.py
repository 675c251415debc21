"""
Notification preferences.

Three reminders, each with an on/off switch and a delivery hour.  The weekly
insights digest also has a delivery day.  Hours are whole hours from
``00:00`` to ``23:00``; days are English weekday names.

Validation goes through pydantic.  Every problem comes back together as one
``InvalidFieldError`` keyed by dotted path (``daily_reminder.time``), the
same shape the record store reports.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..core.exceptions import InvalidFieldError

TIME_OPTIONS = tuple(f"{hour:02d}:00" for hour in range(24))


class Weekday(StrEnum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


class NotificationSetting(BaseModel):
    """One reminder: whether it is on, at what hour, and (weekly only) on which day."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    enabled: bool = True
    time: str = "20:00"
    day: Weekday | None = None

    @field_validator("time", mode="before")
    @classmethod
    def _on_the_hour(cls, v: object) -> object:
        if isinstance(v, str):
            v = v.strip()
        if v not in TIME_OPTIONS:
            raise ValueError(f"must be a whole hour from 00:00 to 23:00, got {v!r}")
        return v

    @field_validator("day", mode="before")
    @classmethod
    def _weekday(cls, v: object) -> object:
        if v is None:
            return None
        if isinstance(v, str) and v.strip().capitalize() in {d.value for d in Weekday}:
            return Weekday(v.strip().capitalize())
        raise ValueError(f"must be a weekday (Monday to Sunday), got {v!r}")


class NotificationSettings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    daily_reminder: NotificationSetting = Field(
        default_factory=lambda: NotificationSetting(enabled=True, time="20:00")
    )
    weekly_insights: NotificationSetting = Field(
        default_factory=lambda: NotificationSetting(enabled=True, time="10:00", day=Weekday.MONDAY)
    )
    community_updates: NotificationSetting = Field(
        default_factory=lambda: NotificationSetting(enabled=False, time="12:00")
    )


def _field_errors(e: ValidationError) -> dict[str, str]:
    errors = {}
    for err in e.errors():
        path = ".".join(str(p) for p in err["loc"]) or "settings"
        errors[path] = err["msg"].removeprefix("Value error, ")
    return errors


def parse_notification_settings(data: Mapping[str, Any] | None = None) -> NotificationSettings:
    """Build settings from a nested mapping; anything left out keeps its default.

    Raises:
        InvalidFieldError: listing every invalid field.
    """
    merged: dict[str, Any] = NotificationSettings().model_dump()
    for name, value in (data or {}).items():
        if name in merged and isinstance(value, Mapping):
            merged[name] = {**merged[name], **value}
        else:
            merged[name] = value
    try:
        return NotificationSettings.model_validate(merged)
    except ValidationError as e:
        raise InvalidFieldError(_field_errors(e)) from None


def update_notification(settings: NotificationSettings, name: str, **changes: Any) -> NotificationSettings:
    """Return new settings with ``changes`` merged into the reminder called ``name``.

    ``update_notification(s, "weekly_insights", day="Friday")`` keeps that
    reminder's switch and hour as they were.

    Raises:
        InvalidFieldError: for an unknown reminder or an invalid value.
    """
    if name not in NotificationSettings.model_fields:
        raise InvalidFieldError({name: "unknown notification"})
    data = settings.model_dump()
    data[name] = {**data[name], **changes}
    return parse_notification_settings(data)
