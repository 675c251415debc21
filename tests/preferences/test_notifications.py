"""Tests for moodmaster.preferences.notifications."""

import pytest

from moodmaster.core.exceptions import InvalidFieldError
from moodmaster.preferences.notifications import (
    TIME_OPTIONS,
    NotificationSettings,
    Weekday,
    parse_notification_settings,
    update_notification,
)


class TestDefaults:
    def test_three_reminders(self):
        settings = NotificationSettings()
        assert settings.daily_reminder.enabled is True
        assert settings.daily_reminder.time == "20:00"
        assert settings.weekly_insights.enabled is True
        assert settings.weekly_insights.time == "10:00"
        assert settings.weekly_insights.day is Weekday.MONDAY
        assert settings.community_updates.enabled is False
        assert settings.community_updates.time == "12:00"

    def test_time_options_are_whole_hours(self):
        assert len(TIME_OPTIONS) == 24
        assert TIME_OPTIONS[0] == "00:00"
        assert TIME_OPTIONS[-1] == "23:00"


class TestParse:
    def test_empty_gives_defaults(self):
        assert parse_notification_settings() == NotificationSettings()
        assert parse_notification_settings({}) == NotificationSettings()

    def test_partial_reminder_keeps_other_defaults(self):
        settings = parse_notification_settings({"community_updates": {"enabled": True, "time": "18:00"}})
        assert settings.community_updates.enabled is True
        assert settings.community_updates.time == "18:00"
        assert settings.daily_reminder.time == "20:00"

    def test_day_is_case_insensitive(self):
        settings = parse_notification_settings({"weekly_insights": {"day": "friday"}})
        assert settings.weekly_insights.day is Weekday.FRIDAY
        assert settings.weekly_insights.time == "10:00"

    @pytest.mark.parametrize("time", ["20:30", "24:00", "8:00", "noon"])
    def test_bad_time(self, time):
        with pytest.raises(InvalidFieldError, match="daily_reminder.time"):
            parse_notification_settings({"daily_reminder": {"time": time}})

    def test_bad_day(self):
        with pytest.raises(InvalidFieldError, match="weekly_insights.day") as exc_info:
            parse_notification_settings({"weekly_insights": {"day": "Funday"}})
        assert "weekday" in exc_info.value.errors["weekly_insights.day"]

    def test_all_problems_reported(self):
        with pytest.raises(InvalidFieldError) as exc_info:
            parse_notification_settings(
                {
                    "daily_reminder": {"time": "7pm"},
                    "weekly_insights": {"day": "Someday"},
                    "push_alerts": {"enabled": True},
                }
            )
        assert set(exc_info.value.errors) == {"daily_reminder.time", "weekly_insights.day", "push_alerts"}


class TestUpdate:
    def test_changes_one_field(self):
        settings = update_notification(NotificationSettings(), "weekly_insights", day="Friday")
        assert settings.weekly_insights.day is Weekday.FRIDAY
        assert settings.weekly_insights.time == "10:00"
        assert settings.weekly_insights.enabled is True

    def test_original_untouched(self):
        original = NotificationSettings()
        update_notification(original, "daily_reminder", enabled=False)
        assert original.daily_reminder.enabled is True

    def test_unknown_reminder(self):
        with pytest.raises(InvalidFieldError, match="sms"):
            update_notification(NotificationSettings(), "sms", enabled=True)

    def test_invalid_value(self):
        with pytest.raises(InvalidFieldError, match="community_updates.time"):
            update_notification(NotificationSettings(), "community_updates", time="12:15")
