"""
Mood catalog.

Fixed registry of mood kinds with their display label, color tag and
valence (1 = awful ... 5 = hilarious).  ``shocked`` only appears in the
journal view; it sits at the neutral valence so it never counts as a good
or bad day.
"""

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

from ..core.exceptions import UnknownMoodError

POSITIVE_VALENCE = 4  # happy and above
NEGATIVE_VALENCE = 2  # sad and below


class MoodKind(StrEnum):
    HILARIOUS = "hilarious"
    HAPPY = "happy"
    NEUTRAL = "neutral"
    SAD = "sad"
    AWFUL = "awful"
    SHOCKED = "shocked"


@dataclass(frozen=True)
class MoodInfo:
    """Display and scoring data for one mood kind."""

    kind: MoodKind
    label: str
    color: str
    valence: int


MOOD_CATALOG: MappingProxyType[MoodKind, MoodInfo] = MappingProxyType(
    {
        MoodKind.HILARIOUS: MoodInfo(MoodKind.HILARIOUS, "Hilarious", "yellow", 5),
        MoodKind.HAPPY: MoodInfo(MoodKind.HAPPY, "Happy", "green", 4),
        MoodKind.NEUTRAL: MoodInfo(MoodKind.NEUTRAL, "Neutral", "gray", 3),
        MoodKind.SAD: MoodInfo(MoodKind.SAD, "Sad", "blue", 2),
        MoodKind.AWFUL: MoodInfo(MoodKind.AWFUL, "Awful", "red", 1),
        MoodKind.SHOCKED: MoodInfo(MoodKind.SHOCKED, "Shocked", "purple", 3),
    }
)

# Moods offered on the calendar, most positive first
CALENDAR_MOODS = (MoodKind.HILARIOUS, MoodKind.HAPPY, MoodKind.NEUTRAL, MoodKind.SAD, MoodKind.AWFUL)


def parse_mood(mood_id: MoodKind | str) -> MoodKind:
    """Resolve a mood id or display label (case-insensitive) to a MoodKind."""
    if isinstance(mood_id, MoodKind):
        return mood_id
    if isinstance(mood_id, str):
        try:
            return MoodKind(mood_id.strip().lower())
        except ValueError:
            pass
    raise UnknownMoodError(mood_id)


def lookup(mood_id: MoodKind | str) -> MoodInfo:
    """Return label, color and valence for a mood. Raises UnknownMoodError."""
    return MOOD_CATALOG[parse_mood(mood_id)]


def valence(mood_id: MoodKind | str) -> int:
    return lookup(mood_id).valence


def is_positive(mood_id: MoodKind | str) -> bool:
    return valence(mood_id) >= POSITIVE_VALENCE


def is_negative(mood_id: MoodKind | str) -> bool:
    return valence(mood_id) <= NEGATIVE_VALENCE
