"""Profile statistics, logging streaks and achievements."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, timedelta

from ..community.models import Post, UserStats
from ..tracking.models import ActivityRecord
from ..tracking.moods import is_negative, is_positive
from ..tracking.store import normalize_date

STREAK_ACHIEVEMENT_DAYS = 7


def _percent(part: int, whole: int) -> int:
    return round(100 * part / whole) if whole else 0


def compute_user_stats(author: str, posts: Sequence[Post], records: Sequence[ActivityRecord]) -> UserStats:
    """Aggregate one author's posts and activity records into profile counters."""
    own_posts = [p for p in posts if p.author == author]

    moods = [r.mood for r in records if r.mood is not None]
    happy = sum(1 for m in moods if is_positive(m))
    sad = sum(1 for m in moods if is_negative(m))
    neutral = len(moods) - happy - sad

    slept = [r.sleep.hours for r in records if r.sleep.hours is not None]

    return UserStats(
        author=author,
        posts_count=len(own_posts),
        likes_received=sum(p.likes for p in own_posts),
        mood_breakdown={
            "happy": _percent(happy, len(moods)),
            "neutral": _percent(neutral, len(moods)),
            "sad": _percent(sad, len(moods)),
        },
        exercise_days=sum(1 for r in records if r.exercise.duration or r.exercise.type),
        meditation_days=sum(1 for r in records if any("meditat" in s.lower() for s in r.self_care)),
        average_sleep=round(sum(slept) / len(slept), 1) if slept else None,
    )


def logging_streak(records: Sequence[ActivityRecord], today: date | str | None = None) -> int:
    """Consecutive days with a mood logged, counting back from ``today``.

    Without ``today`` the streak ends at the most recent day with a mood.
    ``today`` may be a date, datetime or ISO string.
    """
    logged = {r.date for r in records if r.mood is not None}
    if not logged:
        return 0

    cursor = normalize_date(today) if today is not None else max(logged)
    streak = 0
    while cursor in logged:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def has_streak_achievement(records: Sequence[ActivityRecord], today: date | None = None) -> bool:
    return logging_streak(records, today) >= STREAK_ACHIEVEMENT_DAYS


MINDFULNESS_SESSIONS = 10
COMMUNITY_DISCUSSIONS = 3


@dataclass(frozen=True)
class Achievement:
    """A profile badge and how far the user is towards it."""

    title: str
    description: str
    color: str
    progress: int
    goal: int

    @property
    def earned(self) -> bool:
        return self.progress >= self.goal


def achievements(
    records: Sequence[ActivityRecord],
    posts: Sequence[Post],
    author: str,
    today: date | str | None = None,
) -> list[Achievement]:
    """Badges for the settings screen, in display order.

    Streak progress counts back from ``today`` like ``logging_streak``.
    Meditation sessions are days with a meditation self-care entry, and
    community discussions are the author's posts.
    """
    stats = compute_user_stats(author, posts, records)
    return [
        Achievement(
            title="7-Day Streak",
            description=f"Logged your mood for {STREAK_ACHIEVEMENT_DAYS} days straight",
            color="yellow",
            progress=logging_streak(records, today),
            goal=STREAK_ACHIEVEMENT_DAYS,
        ),
        Achievement(
            title="Mindfulness Master",
            description=f"Completed {MINDFULNESS_SESSIONS} meditation sessions",
            color="blue",
            progress=stats.meditation_days,
            goal=MINDFULNESS_SESSIONS,
        ),
        Achievement(
            title="Community Supporter",
            description=f"Participated in {COMMUNITY_DISCUSSIONS} community discussions",
            color="purple",
            progress=stats.posts_count,
            goal=COMMUNITY_DISCUSSIONS,
        ),
    ]
