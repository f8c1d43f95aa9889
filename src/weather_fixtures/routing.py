"""Request routing: map a request URL to the fixture category it is served.

Routes are checked in order; the first whose predicate matches wins:

    current_weather  ->  current
    weather          ->  daily if date..last_date spans more than the
                         threshold, hourly otherwise
    (anything else)  ->  UnknownEndpoint

Date handling is best effort. A missing or unparseable ``date`` /
``last_date`` never fails routing, it falls back to hourly data.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from urllib.parse import unquote, urlsplit

import structlog

from weather_fixtures.config import DEFAULT_DAILY_THRESHOLD_DAYS
from weather_fixtures.errors import UnknownEndpoint
from weather_fixtures.store import Category

logger = structlog.get_logger()

CURRENT_WEATHER_MARKER = "current_weather"
WEATHER_MARKER = "weather"

START_DATE_PARAM = "date"
END_DATE_PARAM = "last_date"

_ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class Route:
    """A named URL predicate and the rule picking its category."""

    name: str
    matches: Callable[[str], bool]
    resolve: Callable[[str, float], Category]


def is_current_weather(url: str) -> bool:
    return CURRENT_WEATHER_MARKER in url


def is_weather(url: str) -> bool:
    return WEATHER_MARKER in url


def query_value(url: str, key: str) -> str | None:
    """First value of query parameter ``key``, percent-decoded.

    ``+`` is kept as-is so UTC offsets like ``+01:00`` survive.
    """
    for pair in urlsplit(url).query.split("&"):
        name, sep, value = pair.partition("=")
        if sep and unquote(name) == key:
            return unquote(value)
    return None


def _parse_date(value: str) -> datetime | None:
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        return None


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


def date_span_days(url: str) -> float | None:
    """Days between ``date`` and ``last_date``, or None if not computable."""
    raw_start = query_value(url, START_DATE_PARAM)
    raw_end = query_value(url, END_DATE_PARAM)
    if raw_start is None or raw_end is None:
        return None

    start, end = _parse_date(raw_start), _parse_date(raw_end)
    if start is None or end is None:
        logger.debug("date_span_unparseable", date=raw_start, last_date=raw_end)
        return None
    # A value without an offset is read as UTC when the other one has an offset.
    if (start.tzinfo is None) != (end.tzinfo is None):
        start, end = _as_utc(start), _as_utc(end)
    return (end - start) / _ONE_DAY


def _resolve_current(url: str, daily_threshold_days: float) -> Category:
    return Category.CURRENT


def _resolve_weather(url: str, daily_threshold_days: float) -> Category:
    span = date_span_days(url)
    if span is not None and span > daily_threshold_days:
        return Category.DAILY
    return Category.HOURLY


ROUTES: tuple[Route, ...] = (
    Route(CURRENT_WEATHER_MARKER, is_current_weather, _resolve_current),
    Route(WEATHER_MARKER, is_weather, _resolve_weather),
)


def resolve_route(url: str) -> Route:
    """First route matching ``url``. Raises UnknownEndpoint if none does."""
    for route in ROUTES:
        if route.matches(url):
            return route
    raise UnknownEndpoint(url)


def classify(url: str, daily_threshold_days: float = DEFAULT_DAILY_THRESHOLD_DAYS) -> Category:
    """Category of fixture data served for ``url``."""
    route = resolve_route(url)
    category = route.resolve(url, daily_threshold_days)
    logger.debug("request_routed", url=url, route=route.name, category=category.value)
    return category
