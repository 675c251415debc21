"""User preferences shown on the settings screen."""

from .notifications import (
    TIME_OPTIONS,
    NotificationSetting,
    NotificationSettings,
    Weekday,
    parse_notification_settings,
    update_notification,
)

__all__ = [
    "TIME_OPTIONS",
    "NotificationSetting",
    "NotificationSettings",
    "Weekday",
    "parse_notification_settings",
    "update_notification",
]
