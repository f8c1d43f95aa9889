"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from weather_fixtures.client import MockWeatherClient
from weather_fixtures.store import FixtureStore

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture()
def store() -> FixtureStore:
    """Store over the small, distinguishable datasets in tests/fixtures."""
    return FixtureStore.load(FIXTURES_DIR)


@pytest.fixture()
def client(store: FixtureStore) -> MockWeatherClient:
    return MockWeatherClient(store)


@pytest.fixture()
def current_data() -> dict:
    return json.loads((FIXTURES_DIR / "current_weather.json").read_text())


@pytest.fixture()
def hourly_data() -> dict:
    return json.loads((FIXTURES_DIR / "hourly_weather.json").read_text())


@pytest.fixture()
def daily_data() -> list:
    return json.loads((FIXTURES_DIR / "daily_weather.json").read_text())


@pytest.fixture()
def fixtures_copy(tmp_path: Path) -> Path:
    """Writable copy of tests/fixtures, for breaking individual files."""
    for src in FIXTURES_DIR.glob("*.json"):
        (tmp_path / src.name).write_text(src.read_text())
    return tmp_path


@pytest.fixture()
def fixtures_dir() -> Path:
    return FIXTURES_DIR
