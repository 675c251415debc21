"""Moodmaster: mood tracking, insights and calendar aggregation."""

__version__ = "0.1.0"
