"""
Calendar aggregation.

Lays records out as month, week and day cells for the calendar screen and
builds the mood trend series for its chart.  Weeks start on Sunday.
"""

from __future__ import annotations

import calendar
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, timedelta
from enum import StrEnum

from ..core.exceptions import InvalidFieldError
from ..tracking.models import ActivityRecord
from ..tracking.moods import MoodKind, valence
from ..tracking.store import normalize_date

DEFAULT_TREND_WINDOW = 30


class CalendarView(StrEnum):
    MONTH = "month"
    WEEK = "week"
    DAY = "day"


@dataclass(frozen=True)
class DayCell:
    """One square of the calendar grid.

    Blank padding cells (before day 1 of a month) have ``date=None``.
    """

    date: date | None = None
    mood: MoodKind | None = None
    in_month: bool = True

    @property
    def day(self) -> int | None:
        return self.date.day if self.date else None

    @property
    def is_blank(self) -> bool:
        return self.date is None


@dataclass(frozen=True)
class TrendPoint:
    date: date
    valence: int


def _moods_by_date(records: Iterable[ActivityRecord]) -> dict[date, MoodKind | None]:
    return {r.date: r.mood for r in records}


def _sunday_offset(d: date) -> int:
    """Days since the most recent Sunday (0 for Sunday itself)."""
    return (d.weekday() + 1) % 7


def build_month_grid(year: int, month: int, records: Iterable[ActivityRecord]) -> list[DayCell]:
    """Leading blank cells for the weekday of the 1st, then one cell per day.

    Raises:
        InvalidFieldError: for a month outside 1..12 or an unsupported year.
    """
    errors = {}
    if not 1 <= month <= 12:
        errors["month"] = f"must be between 1 and 12, got {month}"
    if not date.min.year <= year <= date.max.year:
        errors["year"] = f"out of range: {year}"
    if errors:
        raise InvalidFieldError(errors)

    moods = _moods_by_date(records)
    first_weekday, days_in_month = calendar.monthrange(year, month)
    leading = (first_weekday + 1) % 7

    cells = [DayCell() for _ in range(leading)]
    for day in range(1, days_in_month + 1):
        d = date(year, month, day)
        cells.append(DayCell(date=d, mood=moods.get(d)))
    return cells


def build_week_grid(anchor: date | str, records: Iterable[ActivityRecord]) -> list[DayCell]:
    """Seven cells starting at the Sunday on or before ``anchor``.

    ``anchor`` may be a date, datetime or ISO string.
    """
    anchor = normalize_date(anchor)
    moods = _moods_by_date(records)
    start = anchor - timedelta(days=_sunday_offset(anchor))
    cells = []
    for i in range(7):
        d = start + timedelta(days=i)
        cells.append(DayCell(date=d, mood=moods.get(d), in_month=d.month == anchor.month))
    return cells


def build_day_cell(day: date | str, records: Iterable[ActivityRecord]) -> DayCell:
    day = normalize_date(day)
    return DayCell(date=day, mood=_moods_by_date(records).get(day))


def build_trend_series(
    records: Sequence[ActivityRecord],
    window_size: int = DEFAULT_TREND_WINDOW,
) -> list[TrendPoint]:
    """Valence per day over the most recent ``window_size`` records.

    The window is taken first and records without a mood are dropped
    afterwards, so a window of 30 may plot fewer than 30 points.
    """
    if window_size < 0:
        raise InvalidFieldError({"window_size": f"must not be negative, got {window_size}"})
    if window_size == 0:
        return []

    ordered = sorted(records, key=lambda r: r.date)[-window_size:]
    return [TrendPoint(date=r.date, valence=valence(r.mood)) for r in ordered if r.mood is not None]


def shift_anchor(anchor: date | str, view: CalendarView | str, steps: int = 1) -> date:
    """Move the calendar anchor by ``steps`` months, weeks or days.

    Month moves keep the day of month, clamped to the target month's length
    (Jan 31 + 1 month -> Feb 29 in a leap year).
    """
    try:
        view = CalendarView(view)
    except ValueError:
        raise InvalidFieldError({"view": f"must be month, week or day, got {view!r}"}) from None
    anchor = normalize_date(anchor)
    if view is CalendarView.DAY:
        return anchor + timedelta(days=steps)
    if view is CalendarView.WEEK:
        return anchor + timedelta(weeks=steps)

    months = anchor.year * 12 + (anchor.month - 1) + steps
    year, month = divmod(months, 12)
    month += 1
    day = min(anchor.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)
