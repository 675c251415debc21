"""
Mood catalog, per-day activity records and their sources.

Core module (no heavy deps): everything here is in-memory and synchronous.
"""

from .models import ActivityRecord, ExerciseLog, Intensity, Meal, NutritionLog, SleepLog, SleepQuality
from .moods import MOOD_CATALOG, MoodInfo, MoodKind, lookup
from .sources import BaseSource, RecordSource, SourceRegistry, StaticSource, YamlFileSource
from .store import ActivityRecordStore

__all__ = [
    "MOOD_CATALOG",
    "ActivityRecord",
    "ActivityRecordStore",
    "BaseSource",
    "ExerciseLog",
    "Intensity",
    "Meal",
    "MoodInfo",
    "MoodKind",
    "NutritionLog",
    "RecordSource",
    "SleepLog",
    "SleepQuality",
    "SourceRegistry",
    "StaticSource",
    "YamlFileSource",
    "lookup",
]
