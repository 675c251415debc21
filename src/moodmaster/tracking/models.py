"""
Activity record data models.

One ``ActivityRecord`` per calendar day, grouping the mood, the journal
text and the wellness logs (sleep, exercise, nutrition, self-care).
Numeric fields start as None ("not logged") rather than 0 so that the
insight rules can tell a missing value from a real zero.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum

from .moods import MoodKind


class SleepQuality(StrEnum):
    POOR = "Poor"
    FAIR = "Fair"
    GOOD = "Good"
    EXCELLENT = "Excellent"


class Intensity(StrEnum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


@dataclass
class SleepLog:
    """Last night's sleep."""

    hours: int | None = None
    quality: SleepQuality | None = None


@dataclass
class ExerciseLog:
    """The day's main workout.

    Attributes:
        type: Free-text kind of exercise ("Walking", "Yoga", ...).
        duration: Minutes.
        intensity: Perceived effort.
    """

    type: str | None = None
    duration: int | None = None
    intensity: Intensity | None = None


@dataclass
class Meal:
    name: str
    calories: int | None = None


@dataclass
class NutritionLog:
    """Meals in the order they were entered, plus glasses of water."""

    meals: list[Meal] = field(default_factory=list)
    water: int | None = None


@dataclass
class ActivityRecord:
    """A single day's mood, journal and wellness data."""

    date: date
    mood: MoodKind | None = None
    journal: str | None = None
    sleep: SleepLog = field(default_factory=SleepLog)
    exercise: ExerciseLog = field(default_factory=ExerciseLog)
    nutrition: NutritionLog = field(default_factory=NutritionLog)
    self_care: list[str] = field(default_factory=list)

    def activity_labels(self) -> list[str]:
        """Exercise type followed by self-care labels, blanks dropped."""
        labels = [self.exercise.type] if self.exercise.type else []
        labels.extend(label for label in self.self_care if label)
        return labels

    def __repr__(self) -> str:
        mood = self.mood.value if self.mood else "-"
        return f"ActivityRecord(date={self.date.isoformat()}, mood={mood})"
