"""Fixture store: the three weather datasets, loaded once from disk."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any

import structlog

from weather_fixtures.errors import LoadError

logger = structlog.get_logger()

BUNDLED_DATA_DIR = Path(__file__).parent / "data"


class Category(StrEnum):
    """Kind of weather data a request is served."""

    CURRENT = "current"
    HOURLY = "hourly"
    DAILY = "daily"

    @property
    def fixture_name(self) -> str:
        return f"{self.value}_weather"


@dataclass(frozen=True)
class FixtureStore:
    """Read-only holder of the current, hourly and daily datasets.

    Build it with :meth:`load`. Datasets are shared, so callers must not
    mutate what the accessors return.
    """

    directory: Path
    current: Any
    hourly: Any
    daily: Any

    @classmethod
    def load(cls, directory: Path | str | None = None) -> FixtureStore:
        """Load all three fixtures from ``directory`` (bundled data if None).

        Raises LoadError on the first fixture that cannot be read or parsed.
        """
        directory = Path(directory) if directory is not None else BUNDLED_DATA_DIR
        datasets = {category: _read_fixture(directory, category) for category in Category}
        logger.info("fixtures_loaded", directory=str(directory))
        return cls(
            directory=directory,
            current=datasets[Category.CURRENT],
            hourly=datasets[Category.HOURLY],
            daily=datasets[Category.DAILY],
        )

    def get(self, category: Category) -> Any:
        return getattr(self, category.value)

    def get_current(self) -> Any:
        return self.current

    def get_hourly(self) -> Any:
        return self.hourly

    def get_daily(self) -> Any:
        return self.daily


def _read_fixture(directory: Path, category: Category) -> Any:
    """Read and parse ``<directory>/<fixture_name>.json``."""
    name = category.fixture_name
    path = directory / f"{name}.json"
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error("fixture_load_failed", fixture=name, path=str(path), error=str(e))
        raise LoadError(name, path, str(e)) from e
