"""
Record sources.

Anything that can produce dated ``ActivityRecord`` objects (a YAML fixture
file, a seeded demo generator, a future sync backend) implements the
``RecordSource`` protocol so the store and the analytics can be fed the
same way in tests and in the app.

Sources are discovered at runtime via ``importlib.metadata`` entry points
(group: ``moodmaster.record_sources``):

    [project.entry-points."moodmaster.record_sources"]
    demo = "my_package.demo:DemoSource"
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from datetime import date, timedelta
from importlib.metadata import entry_points
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import yaml
from loguru import logger

from ..core.exceptions import DataSourceError, InvalidFieldError
from .models import ActivityRecord
from .store import apply_fields, normalize_date, validate_partial


@runtime_checkable
class RecordSource(Protocol):
    """Protocol that every record source must satisfy."""

    name: str

    def fetch(self, start: date, end: date) -> list[ActivityRecord]:
        """Return records dated within ``start``..``end`` (inclusive)."""
        ...


class BaseSource(ABC):
    """Optional ABC with shared plumbing for sources."""

    name: str = "base"

    def __init__(self, **config: Any):
        self.config = config

    @abstractmethod
    def fetch(self, start: date, end: date) -> list[ActivityRecord]:
        """Return records for a date range."""

    def _date_range(self, start: date, end: date) -> list[date]:
        """Generate a list of dates from start to end (inclusive)."""
        days = (end - start).days + 1
        return [start + timedelta(days=i) for i in range(days)]


def record_from_mapping(data: Mapping[str, Any]) -> ActivityRecord:
    """Build a record from an upsert-style mapping with a ``date`` key.

    Raises:
        InvalidFieldError: if the date or any field is invalid.
    """
    if "date" not in data:
        raise InvalidFieldError({"date": "is required"})
    day = normalize_date(data["date"])
    fields = {k: v for k, v in data.items() if k != "date"}
    return apply_fields(ActivityRecord(date=day), validate_partial(fields))


class StaticSource(BaseSource):
    """Serves a fixed list of records; the deterministic stand-in for demo data."""

    name = "static"

    def __init__(self, records: Iterable[ActivityRecord | Mapping[str, Any]] = (), **config: Any):
        super().__init__(**config)
        self._records = [r if isinstance(r, ActivityRecord) else record_from_mapping(r) for r in records]

    def fetch(self, start: date, end: date) -> list[ActivityRecord]:
        return sorted((r for r in self._records if start <= r.date <= end), key=lambda r: r.date)


class YamlFileSource(BaseSource):
    """Reads records from a YAML file holding a list of record mappings.

    Example file::

        - date: 2024-01-15
          mood: happy
          sleep: {hours: 8, quality: Good}
          self_care: [Meditation]
    """

    name = "yaml"

    def __init__(self, path: str | Path, **config: Any):
        super().__init__(**config)
        self.path = Path(path).expanduser()

    def _load(self) -> list[ActivityRecord]:
        try:
            with open(self.path) as f:
                raw = yaml.safe_load(f) or []
        except OSError as e:
            raise DataSourceError(f"Cannot read records file {self.path}: {e}") from e
        except yaml.YAMLError as e:
            raise DataSourceError(f"Malformed YAML in {self.path}: {e}") from e

        if not isinstance(raw, list):
            raise DataSourceError(f"{self.path} must contain a list of records")

        records = []
        for i, item in enumerate(raw):
            if not isinstance(item, Mapping):
                raise DataSourceError(f"{self.path}: entry {i} is not a mapping")
            try:
                records.append(record_from_mapping(item))
            except InvalidFieldError as e:
                raise DataSourceError(f"{self.path}: entry {i}: {e}") from e
        logger.debug(f"Read {len(records)} records from {self.path}")
        return records

    def fetch(self, start: date, end: date) -> list[ActivityRecord]:
        return sorted((r for r in self._load() if start <= r.date <= end), key=lambda r: r.date)

    def fetch_all(self) -> list[ActivityRecord]:
        """Every record in the file, oldest first."""
        return sorted(self._load(), key=lambda r: r.date)


class SourceRegistry:
    """Discover and manage record source plugins."""

    def __init__(self):
        self._sources: dict[str, type] = {"static": StaticSource, "yaml": YamlFileSource}

    def discover(self) -> dict[str, type]:
        """Scan entry points and return {name: source_class}."""
        for ep in entry_points(group="moodmaster.record_sources"):
            try:
                cls = ep.load()
            except Exception as e:
                logger.warning(f"Failed to load record source '{ep.name}': {e}")
                continue
            if isinstance(cls, type) and (issubclass(cls, BaseSource) or hasattr(cls, "fetch")):
                self._sources[ep.name] = cls
                logger.debug(f"Discovered record source: {ep.name}")
            else:
                logger.warning(f"Entry point '{ep.name}' is not a record source, skipping")

        return dict(self._sources)

    def register(self, name: str, source_class: type) -> None:
        """Manually register a source (useful for testing)."""
        self._sources[name] = source_class

    def get(self, name: str) -> type | None:
        return self._sources.get(name)

    def list_names(self) -> list[str]:
        return list(self._sources.keys())

    def create(self, name: str, **config: Any) -> RecordSource:
        """Instantiate a source by name with the given config."""
        cls = self._sources.get(name)
        if cls is None:
            raise KeyError(f"No record source registered as '{name}'. Available: {self.list_names()}")
        return cls(**config)
