"""Mock HTTP client serving weather fixtures instead of the network."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx
import structlog

from weather_fixtures.config import DEFAULT_DAILY_THRESHOLD_DAYS, DEFAULT_TIMEOUT, Settings
from weather_fixtures.errors import UnknownEndpoint
from weather_fixtures.routing import classify
from weather_fixtures.store import Category, FixtureStore

logger = structlog.get_logger()


@dataclass(frozen=True)
class MockResponse:
    """The part of an HTTP response a weather consumer reads."""

    data: Any
    status: int = 200
    status_text: str = "OK"

    def json(self) -> Any:
        return self.data

    def raise_for_status(self) -> MockResponse:
        return self


class MockWeatherClient:
    """Stands in for an async HTTP client during tests.

    ``get`` is async only to match the real client's calling convention;
    it never waits on I/O. ``timeout`` is advertised but has no effect.
    """

    def __init__(
        self,
        store: FixtureStore,
        timeout: float = DEFAULT_TIMEOUT,
        daily_threshold_days: float = DEFAULT_DAILY_THRESHOLD_DAYS,
    ) -> None:
        self._store = store
        self._daily_threshold_days = daily_threshold_days
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> MockWeatherClient:
        return cls(
            FixtureStore.load(settings.fixtures_dir),
            timeout=settings.fixtures_timeout,
            daily_threshold_days=settings.fixtures_daily_threshold_days,
        )

    @property
    def store(self) -> FixtureStore:
        return self._store

    def respond(self, url: str) -> MockResponse:
        """Build the response for ``url``. Raises UnknownEndpoint."""
        try:
            category = classify(url, self._daily_threshold_days)
        except UnknownEndpoint:
            logger.warning("unknown_endpoint", url=url)
            raise
        return self.serve(category)

    def serve(self, category: Category) -> MockResponse:
        """Response carrying the dataset of ``category``."""
        # Copy so a consumer mutating the payload can't leak into later tests.
        return MockResponse(data=copy.deepcopy(self._store.get(category)))

    async def get(self, url: str, params: Mapping[str, Any] | None = None) -> MockResponse:
        if params:
            url = str(httpx.URL(url).copy_merge_params(params))
        logger.info("mock_api_call", url=url)
        return self.respond(url)

    def transport(self) -> httpx.MockTransport:
        """httpx transport serving the same fixtures.

        Usable with both ``httpx.Client`` and ``httpx.AsyncClient``.
        """

        def handler(request: httpx.Request) -> httpx.Response:
            url = str(request.url)
            logger.info("mock_api_call", url=url, method=request.method)
            response = self.respond(url)
            return httpx.Response(response.status, json=response.data)

        return httpx.MockTransport(handler)
