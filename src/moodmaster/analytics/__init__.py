"""
Derived views over activity records: insights, calendar grids, trends
and profile statistics.  Everything here is a pure function of its inputs.
"""

from .calendar_grid import (
    CalendarView,
    DayCell,
    TrendPoint,
    build_day_cell,
    build_month_grid,
    build_trend_series,
    build_week_grid,
    shift_anchor,
)
from .insights import InsightEngine, InsightThresholds, TrendSummary, derive_insights, journal_insight, summarize_trend
from .stats import Achievement, achievements, compute_user_stats, has_streak_achievement, logging_streak

__all__ = [
    "Achievement",
    "CalendarView",
    "DayCell",
    "InsightEngine",
    "InsightThresholds",
    "TrendPoint",
    "TrendSummary",
    "achievements",
    "build_day_cell",
    "build_month_grid",
    "build_trend_series",
    "build_week_grid",
    "compute_user_stats",
    "derive_insights",
    "has_streak_achievement",
    "journal_insight",
    "logging_streak",
    "shift_anchor",
    "summarize_trend",
]
