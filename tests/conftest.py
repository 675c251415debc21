"""Shared test fixtures for moodmaster."""

import os
import tempfile
from datetime import date, datetime

import pytest

from moodmaster.community.models import Post
from moodmaster.tracking.models import ActivityRecord, ExerciseLog, NutritionLog, SleepLog
from moodmaster.tracking.moods import MoodKind


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "insights": {"sleep_min_hours": 8, "water_min_glasses": 6},
        "calendar": {"trend_window": 7},
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def week_of_records():
    """Seven consecutive days, 2024-01-01 .. 2024-01-07, with a mix of moods."""

    def rec(day, mood, hours, exercise=None, minutes=None, water=None, self_care=()):
        return ActivityRecord(
            date=date(2024, 1, day),
            mood=mood,
            sleep=SleepLog(hours=hours),
            exercise=ExerciseLog(type=exercise, duration=minutes),
            nutrition=NutritionLog(water=water),
            self_care=list(self_care),
        )

    return [
        rec(1, MoodKind.HAPPY, 8, "Running", 40, 8, ["Meditation"]),
        rec(2, MoodKind.SAD, 5, None, None, 4),
        rec(3, MoodKind.HILARIOUS, 9, "Yoga", 30, 9, ["Meditation", "Reading"]),
        rec(4, MoodKind.NEUTRAL, 7, "Walking", 20, 8),
        rec(5, MoodKind.AWFUL, 4, None, None, 2),
        rec(6, MoodKind.HAPPY, 7, None, None, 8, ["Reading"]),
        rec(7, None, 6, "Running", 45, 3),
    ]


@pytest.fixture
def posts():
    return [
        Post(id=1, author="Anonymous1", title="Weekly gratitude thread", body="...", created_at=datetime(2024, 1, 1, 9), likes=5),
        Post(id=2, author="Anonymous2", title="Overcoming anxiety tips", body="...", created_at=datetime(2024, 1, 3, 9), likes=12),
        Post(id=3, author="Anonymous1", title="Share your self-care routine!", body="...", created_at=datetime(2024, 1, 2, 9), likes=5),
        Post(id=4, author="Anonymous3", title="Finding peace in daily meditation", body="...", created_at=datetime(2024, 1, 4, 9), likes=0),
    ]
