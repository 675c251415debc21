"""
Rule-based insight engine.

Turns a window of activity records into short banner messages.  The rules
are plain threshold checks, evaluated in a fixed order; each contributes at
most one message:

    1. sleep: latest night under the recommended hours
    2. exercise: latest workout long enough to celebrate
    3. hydration: latest water intake under target
    4. trend: good vs. challenging days, the activity most associated
       with good days, and average sleep on good days

"Latest" means the record with the greatest date, whatever the input order.
Fields that were never logged do not trigger a rule.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from ..core.config import Config
from ..tracking.models import ActivityRecord
from ..tracking.moods import MoodKind, is_negative, is_positive, parse_mood

NO_SLEEP_DATA = "no data"


@dataclass
class InsightThresholds:
    """Cut-offs for the daily rules.

    Attributes:
        sleep_min_hours: Recommend more sleep below this many hours.
        exercise_min_minutes: Praise workouts of at least this many minutes.
        water_min_glasses: Recommend more water below this many glasses.
    """

    sleep_min_hours: int = 7
    exercise_min_minutes: int = 30
    water_min_glasses: int = 8

    @classmethod
    def from_config(cls, config: Config) -> InsightThresholds:
        insights = config.settings.insights
        return cls(
            sleep_min_hours=insights.sleep_min_hours,
            exercise_min_minutes=insights.exercise_min_minutes,
            water_min_glasses=insights.water_min_glasses,
        )


@dataclass
class TrendSummary:
    """Numbers behind the trend message.

    ``mean_positive_sleep`` is None when no good day has sleep logged, so
    callers never see a NaN from an empty average.
    """

    total_days: int
    positive_days: int
    negative_days: int
    top_activity: str | None
    mean_positive_sleep: float | None

    @property
    def sleep_display(self) -> str:
        if self.mean_positive_sleep is None:
            return NO_SLEEP_DATA
        return f"{self.mean_positive_sleep:.1f}"


def summarize_trend(records: Sequence[ActivityRecord]) -> TrendSummary:
    positive = [r for r in records if r.mood is not None and is_positive(r.mood)]
    negative = [r for r in records if r.mood is not None and is_negative(r.mood)]

    # Counter keeps first-seen order, and most_common is a stable sort,
    # so ties go to the label that appeared first.
    counts = Counter(label for r in positive for label in r.activity_labels())
    top = counts.most_common(1)

    slept = [r.sleep.hours for r in positive if r.sleep.hours is not None]
    mean_sleep = sum(slept) / len(slept) if slept else None

    return TrendSummary(
        total_days=len(records),
        positive_days=len(positive),
        negative_days=len(negative),
        top_activity=top[0][0] if top else None,
        mean_positive_sleep=mean_sleep,
    )


def _trend_message(summary: TrendSummary) -> str:
    parts = [
        f"In the last {summary.total_days} days, you've had {summary.positive_days} happy days "
        f"and {summary.negative_days} challenging days."
    ]
    if summary.top_activity:
        parts.append(f"{summary.top_activity} seems to be associated with your happier moods.")
    if summary.mean_positive_sleep is None:
        parts.append(f"Average sleep on good days: {NO_SLEEP_DATA} yet.")
    else:
        parts.append(f"Your average sleep on good days is {summary.sleep_display} hours.")
    return " ".join(parts)


class InsightEngine:
    """Applies the insight rules with a given set of thresholds."""

    def __init__(self, thresholds: InsightThresholds | None = None):
        self.thresholds = thresholds or InsightThresholds()

    def derive_insights(self, records: Sequence[ActivityRecord]) -> list[str]:
        """Return insight messages in rule order. Empty input gives ``[]``."""
        if not records:
            return []

        t = self.thresholds
        latest = max(records, key=lambda r: r.date)
        insights: list[str] = []

        if latest.sleep.hours is not None and latest.sleep.hours < t.sleep_min_hours:
            insights.append(f"You might want to aim for at least {t.sleep_min_hours} hours of sleep for optimal health.")

        if latest.exercise.duration is not None and latest.exercise.duration >= t.exercise_min_minutes:
            insights.append("Great job on staying active today!")

        if latest.nutrition.water is not None and latest.nutrition.water < t.water_min_glasses:
            insights.append(f"Try to increase your water intake to at least {t.water_min_glasses} glasses a day.")

        # Without any mood the trend has nothing to say
        if any(r.mood is not None for r in records):
            insights.append(_trend_message(summarize_trend(records)))

        return insights


def derive_insights(
    records: Sequence[ActivityRecord],
    thresholds: InsightThresholds | None = None,
) -> list[str]:
    """Convenience wrapper around ``InsightEngine(thresholds).derive_insights``."""
    return InsightEngine(thresholds).derive_insights(records)


def journal_insight(mood: MoodKind | str | None, exercise_duration: int | None = None) -> str | None:
    """Banner for the journal screen, based on the mood picked and today's exercise.

    ``mood`` goes through ``parse_mood``, so the journal's "Sad" label works.

    Raises:
        UnknownMoodError: if ``mood`` is not a known mood.
    """
    if mood is not None:
        mood = parse_mood(mood)
    if mood is not None and exercise_duration:
        return (
            "Your mood tends to be more positive on days when you exercise. "
            "Great job on staying active today!"
        )
    if mood in (MoodKind.SAD, MoodKind.AWFUL):
        return (
            "I noticed you're not feeling great today. "
            "Consider trying a quick meditation or reaching out to a friend."
        )
    return None
