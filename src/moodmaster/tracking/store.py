"""
In-memory activity record store.

Holds one ``ActivityRecord`` per calendar date for the lifetime of the
session.  Writes are field-level merges: ``upsert(d, {"sleep": {"hours": 8}})``
touches only ``sleep.hours`` and leaves every other field of the day alone.
A partial update is validated as a whole before anything is written, and all
of its problems are reported together in one ``InvalidFieldError``.
"""

from __future__ import annotations

import copy
import datetime as dt
from collections.abc import Callable, Iterator, Mapping
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from loguru import logger

from ..core.exceptions import InvalidFieldError, UnknownMoodError
from .models import ActivityRecord, Intensity, Meal, SleepQuality
from .moods import parse_mood

if TYPE_CHECKING:
    from .sources import RecordSource

DateLike = dt.date | dt.datetime | str


def normalize_date(value: DateLike) -> dt.date:
    """Coerce a date, datetime or ISO ``YYYY-MM-DD`` string to a date."""
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        try:
            return dt.date.fromisoformat(value.strip())
        except ValueError:
            pass
    raise InvalidFieldError({"date": f"not a valid date: {value!r}"})


# ── Field validators ────────────────────────────────────────────────
# Each takes the raw value and returns the normalized one, or raises
# ValueError with a message suitable for an inline form error.


def _non_negative_int(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError("must be an integer")
    if isinstance(value, str):
        if not value.strip():
            return None
        try:
            value = int(value.strip())
        except ValueError:
            raise ValueError("must be an integer") from None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int):
        raise ValueError("must be an integer")
    if value < 0:
        raise ValueError("must not be negative")
    return value


def _choice(enum_cls: type[StrEnum]) -> Callable[[Any], Any]:
    by_name = {member.value.lower(): member for member in enum_cls}

    def validate(value: Any):
        if value is None:
            return None
        if isinstance(value, str) and value.strip().lower() in by_name:
            return by_name[value.strip().lower()]
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValueError(f"must be one of {allowed}")

    return validate


def _text(value: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError("must be text")
    return value


def _mood(value: Any):
    if value is None:
        return None
    try:
        return parse_mood(value)
    except UnknownMoodError as e:
        raise ValueError(str(e)) from None


def _labels(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str) or not isinstance(value, list | tuple):
        raise ValueError("must be a list of labels")
    labels = []
    for item in value:
        if not isinstance(item, str):
            raise ValueError("must be a list of labels")
        if item.strip():
            labels.append(item.strip())
    return labels


def _meals(value: Any, path: str, errors: dict[str, str]) -> list[Meal]:
    if value is None:
        return []
    if isinstance(value, str) or not isinstance(value, list | tuple):
        errors[path] = "must be a list of meals"
        return []
    meals = []
    for i, item in enumerate(value):
        item_path = f"{path}[{i}]"
        if isinstance(item, Meal):
            item = {"name": item.name, "calories": item.calories}
        if not isinstance(item, Mapping):
            errors[item_path] = "must be a meal with a name and calories"
            continue
        name = item.get("name", "")
        if not isinstance(name, str):
            errors[f"{item_path}.name"] = "must be text"
            continue
        try:
            calories = _non_negative_int(item.get("calories"))
        except ValueError as e:
            errors[f"{item_path}.calories"] = str(e)
            continue
        meals.append(Meal(name=name.strip(), calories=calories))
    return meals


_TOP_LEVEL: dict[str, Callable[[Any], Any]] = {
    "mood": _mood,
    "journal": _text,
    "self_care": _labels,
}

_SECTIONS: dict[str, dict[str, Callable[[Any], Any]]] = {
    "sleep": {"hours": _non_negative_int, "quality": _choice(SleepQuality)},
    "exercise": {"type": _text, "duration": _non_negative_int, "intensity": _choice(Intensity)},
    "nutrition": {"water": _non_negative_int},
}


def validate_partial(partial: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a partial record and return it normalized.

    Returns a flat ``{"sleep.hours": 8, "mood": MoodKind.HAPPY, ...}`` mapping.

    Raises:
        InvalidFieldError: listing every invalid field.
    """
    errors: dict[str, str] = {}
    clean: dict[str, Any] = {}

    if not isinstance(partial, Mapping):
        raise InvalidFieldError({"record": "must be a mapping of fields"})

    for key, value in partial.items():
        if key in _TOP_LEVEL:
            try:
                clean[key] = _TOP_LEVEL[key](value)
            except ValueError as e:
                errors[key] = str(e)
        elif key in _SECTIONS:
            if not isinstance(value, Mapping):
                errors[key] = "must be a mapping of fields"
                continue
            fields = _SECTIONS[key]
            for sub_key, sub_value in value.items():
                path = f"{key}.{sub_key}"
                if path == "nutrition.meals":
                    clean[path] = _meals(sub_value, path, errors)
                elif sub_key in fields:
                    try:
                        clean[path] = fields[sub_key](sub_value)
                    except ValueError as e:
                        errors[path] = str(e)
                else:
                    errors[path] = "unknown field"
        else:
            errors[str(key)] = "unknown field"

    if errors:
        raise InvalidFieldError(errors)
    return clean


def apply_fields(record: ActivityRecord, clean: Mapping[str, Any]) -> ActivityRecord:
    """Write validated ``{"section.field": value}`` pairs onto ``record`` in place."""
    for path, value in clean.items():
        if "." in path:
            section, attr = path.split(".", 1)
            setattr(getattr(record, section), attr, value)
        else:
            setattr(record, path, value)
    return record


def set_fields(record: ActivityRecord) -> dict[str, Any]:
    """Flatten the fields ``record`` actually has to ``{"section.field": value}``.

    Unset scalars (None) and empty lists are left out, so the result can be
    merged with ``apply_fields`` without clearing what another write set.
    """
    fields: dict[str, Any] = {}
    for key in _TOP_LEVEL:
        value = getattr(record, key)
        if value is not None and value != []:
            fields[key] = copy.deepcopy(value)
    for section, attrs in _SECTIONS.items():
        for attr in attrs:
            value = getattr(getattr(record, section), attr)
            if value is not None:
                fields[f"{section}.{attr}"] = value
    if record.nutrition.meals:
        fields["nutrition.meals"] = copy.deepcopy(record.nutrition.meals)
    return fields


class ActivityRecordStore:
    """Per-day activity records for one session.

    The store owns its records: ``get`` and ``range`` hand out copies, so
    edits made by a caller never leak back without an ``upsert``.
    """

    def __init__(self):
        self._records: dict[dt.date, ActivityRecord] = {}

    def upsert(self, date: DateLike, partial: Mapping[str, Any]) -> ActivityRecord:
        """Merge ``partial`` into the record for ``date``, creating it if absent.

        Unspecified fields keep their prior values.  List fields
        (``nutrition.meals``, ``self_care``) are replaced as a whole.

        Raises:
            InvalidFieldError: if any field is unknown, negative or out of its
                enumerated set.  Nothing is written in that case.
        """
        day = normalize_date(date)
        clean = validate_partial(partial)

        existing = self._records.get(day)
        record = copy.deepcopy(existing) if existing else ActivityRecord(date=day)
        apply_fields(record, clean)

        self._records[day] = record
        logger.debug(f"{'Updated' if existing else 'Created'} record {day}: {sorted(clean)}")
        return copy.deepcopy(record)

    def get(self, date: DateLike) -> ActivityRecord | None:
        record = self._records.get(normalize_date(date))
        return copy.deepcopy(record) if record else None

    def range(self, start: DateLike | None = None, end: DateLike | None = None) -> list[ActivityRecord]:
        """Return records between ``start`` and ``end`` (inclusive), oldest first.

        Missing days are simply absent.  ``None`` leaves that side open.
        """
        lo = normalize_date(start) if start is not None else None
        hi = normalize_date(end) if end is not None else None
        days = sorted(
            d for d in self._records if (lo is None or d >= lo) and (hi is None or d <= hi)
        )
        return [copy.deepcopy(self._records[d]) for d in days]

    def load(self, source: RecordSource, start: DateLike, end: DateLike) -> int:
        """Upsert every record a ``RecordSource`` yields for the date range.

        Each source record is merged field by field like ``upsert``: only the
        fields the source set overwrite what the store already holds.

        Returns:
            Number of records written.
        """
        records = source.fetch(normalize_date(start), normalize_date(end))
        for incoming in records:
            day = normalize_date(incoming.date)
            existing = self._records.get(day)
            record = copy.deepcopy(existing) if existing else ActivityRecord(date=day)
            self._records[day] = apply_fields(record, set_fields(incoming))
        logger.debug(f"Loaded {len(records)} records from source '{source.name}'")
        return len(records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, date: object) -> bool:
        try:
            return normalize_date(date) in self._records  # type: ignore[arg-type]
        except InvalidFieldError:
            return False

    def __iter__(self) -> Iterator[ActivityRecord]:
        return iter(self.range())
