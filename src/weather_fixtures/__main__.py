"""CLI entry point for weather-fixtures."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

import click
import structlog

from weather_fixtures.client import MockWeatherClient
from weather_fixtures.config import Settings
from weather_fixtures.errors import LoadError, UnknownEndpoint
from weather_fixtures.routing import resolve_route
from weather_fixtures.store import Category, FixtureStore

_LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_fixtures_dir_option = click.option(
    "--fixtures-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the *_weather.json fixtures (overrides FIXTURES_DIR).",
)


def _setup_logging(level: str) -> None:
    """Configure structlog."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            _LOG_LEVELS.get(level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def _load_settings(fixtures_dir: Path | None) -> Settings:
    try:
        kwargs = {}
        if fixtures_dir is not None:
            kwargs["fixtures_dir"] = fixtures_dir
        settings = Settings(**kwargs)  # type: ignore[arg-type]
    except Exception as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    _setup_logging(settings.log_level)
    return settings


@click.group()
@click.version_option(package_name="weather-fixtures")
def cli() -> None:
    """Offline weather API fixtures for tests."""


@cli.command()
@_fixtures_dir_option
def check(fixtures_dir: Path | None) -> None:
    """Load every fixture and print a short summary."""
    settings = _load_settings(fixtures_dir)
    log = structlog.get_logger()

    try:
        store = FixtureStore.load(settings.fixtures_dir)
    except LoadError as e:
        log.error("fixture_check_failed", fixture=e.name, error=e.reason)
        sys.exit(1)

    click.echo(f"Fixtures in {store.directory}:")
    for category in Category:
        click.echo(f"   {category.fixture_name}: {_describe(store.get(category))}")


@cli.command()
@click.argument("url")
@_fixtures_dir_option
def route(url: str, fixtures_dir: Path | None) -> None:
    """Show which fixture a request URL would be served."""
    settings = _load_settings(fixtures_dir)
    log = structlog.get_logger()

    try:
        client = MockWeatherClient.from_settings(settings)
        matched = resolve_route(url)
        category = matched.resolve(url, settings.fixtures_daily_threshold_days)
        response = client.serve(category)
    except (LoadError, UnknownEndpoint) as e:
        log.error("route_failed", url=url, error=str(e))
        sys.exit(1)

    click.echo(
        f"{url}\n   route: {matched.name} -> {category.fixture_name} "
        f"({response.status} {response.status_text})"
    )


def _describe(data: Any) -> str:
    if isinstance(data, dict):
        return f"object with keys {', '.join(sorted(data)) or '(none)'}"
    if isinstance(data, list):
        return f"array of {len(data)} items"
    return type(data).__name__


if __name__ == "__main__":
    cli()
