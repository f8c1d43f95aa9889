"""pytest fixtures exposing the bundled weather data.

Registered through the ``pytest11`` entry point, so any project with
weather-fixtures installed can request them directly.
"""

from __future__ import annotations

import pytest

from weather_fixtures.client import MockWeatherClient
from weather_fixtures.store import FixtureStore


@pytest.fixture(scope="session")
def weather_fixture_store() -> FixtureStore:
    """Bundled current/hourly/daily datasets, loaded once per session."""
    return FixtureStore.load()


@pytest.fixture()
def mock_weather_client(weather_fixture_store: FixtureStore) -> MockWeatherClient:
    """Mock client serving the bundled datasets."""
    return MockWeatherClient(weather_fixture_store)
