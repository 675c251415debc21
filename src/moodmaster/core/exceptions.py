"""
Moodmaster exception hierarchy.

All moodmaster exceptions inherit from MoodMasterError, so the UI layer can
catch library-level errors with one clause while still telling field
validation apart from an unknown mood or a broken data source.
"""

from collections.abc import Mapping


class MoodMasterError(Exception):
    """Base exception class for all moodmaster errors."""


class ConfigurationError(MoodMasterError):
    """Raised for configuration errors (missing keys, invalid values)."""


class DataSourceError(MoodMasterError):
    """Raised when a record source cannot be read or yields malformed data."""


class UnknownMoodError(MoodMasterError):
    """Raised when a mood identifier is not in the catalog."""

    def __init__(self, mood_id: object):
        self.mood_id = mood_id
        super().__init__(f"Unknown mood: {mood_id!r}")


class InvalidFieldError(MoodMasterError):
    """Raised when one or more fields fail validation.

    Every failing field is reported at once so a form can show all of its
    inline errors together.

    Attributes:
        errors: Dotted field path -> human-readable message.
    """

    def __init__(self, errors: Mapping[str, str]):
        self.errors = dict(errors)
        detail = "; ".join(f"{path}: {msg}" for path, msg in self.errors.items())
        super().__init__(f"Invalid field(s): {detail}")
