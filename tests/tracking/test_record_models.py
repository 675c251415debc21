"""Tests for moodmaster.tracking.models."""

from datetime import date

from moodmaster.tracking.models import ActivityRecord, ExerciseLog, Intensity, SleepQuality
from moodmaster.tracking.moods import MoodKind


class TestActivityRecord:
    def test_defaults_are_unset(self):
        rec = ActivityRecord(date=date(2024, 1, 1))
        assert rec.mood is None
        assert rec.sleep.hours is None
        assert rec.exercise.duration is None
        assert rec.nutrition.meals == []
        assert rec.nutrition.water is None
        assert rec.self_care == []

    def test_sub_records_not_shared(self):
        a = ActivityRecord(date=date(2024, 1, 1))
        b = ActivityRecord(date=date(2024, 1, 2))
        a.self_care.append("Reading")
        a.sleep.hours = 8
        assert b.self_care == []
        assert b.sleep.hours is None

    def test_activity_labels(self):
        rec = ActivityRecord(
            date=date(2024, 1, 1),
            exercise=ExerciseLog(type="Yoga", duration=30),
            self_care=["Meditation", ""],
        )
        assert rec.activity_labels() == ["Yoga", "Meditation"]

    def test_repr(self):
        rec = ActivityRecord(date=date(2024, 1, 1), mood=MoodKind.HAPPY)
        assert repr(rec) == "ActivityRecord(date=2024-01-01, mood=happy)"


class TestEnums:
    def test_values_match_form_options(self):
        assert [q.value for q in SleepQuality] == ["Poor", "Fair", "Good", "Excellent"]
        assert [i.value for i in Intensity] == ["Low", "Moderate", "High"]

    def test_is_string_enum(self):
        assert isinstance(SleepQuality.GOOD, str)
