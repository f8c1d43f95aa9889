"""Exceptions raised by the fixture store and the request router."""

from __future__ import annotations

from pathlib import Path


class FixtureError(Exception):
    """Base for all weather-fixtures errors."""


class LoadError(FixtureError):
    """A fixture file could not be read or parsed.

    Raised while building a :class:`~weather_fixtures.store.FixtureStore`.
    The underlying ``OSError`` or ``JSONDecodeError`` is chained as
    ``__cause__``.
    """

    def __init__(self, name: str, path: Path, reason: str) -> None:
        self.name = name
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load fixture '{name}' from {path}: {reason}")


class UnknownEndpoint(FixtureError):  # noqa: N818
    """No route matched the request URL.

    The test is exercising an endpoint that has no fixture.
    """

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Unknown API endpoint: {url}")
