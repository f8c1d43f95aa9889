"""Offline Bright Sky style weather fixtures for tests."""

from __future__ import annotations

from weather_fixtures.client import MockResponse, MockWeatherClient
from weather_fixtures.errors import FixtureError, LoadError, UnknownEndpoint
from weather_fixtures.routing import classify
from weather_fixtures.store import Category, FixtureStore

__all__ = [
    "Category",
    "FixtureError",
    "FixtureStore",
    "LoadError",
    "MockResponse",
    "MockWeatherClient",
    "UnknownEndpoint",
    "classify",
]
