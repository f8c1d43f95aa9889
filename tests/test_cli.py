"""Tests for CLI entry point."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from weather_fixtures.__main__ import cli


class TestCLI:
    """Test CLI commands."""

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_check_bundled(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["check"])
        assert result.exit_code == 0
        assert "current_weather: object with keys sources, weather" in result.output
        assert "daily_weather" in result.output

    def test_check_directory(self, fixtures_dir: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["check", "--fixtures-dir", str(fixtures_dir)])
        assert result.exit_code == 0
        assert "daily_weather: array of 3 items" in result.output

    def test_check_broken_fixture(self, fixtures_copy: Path) -> None:
        (fixtures_copy / "hourly_weather.json").write_text("[")
        runner = CliRunner()
        result = runner.invoke(cli, ["check", "--fixtures-dir", str(fixtures_copy)])
        assert result.exit_code == 1

    def test_invalid_log_level(self) -> None:
        runner = CliRunner(env={"LOG_LEVEL": "LOUD"})
        result = runner.invoke(cli, ["check"])
        assert result.exit_code == 1

    def test_route_daily(self, fixtures_dir: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "route",
                "https://api.example/weather?date=2024-01-01&last_date=2024-01-05",
                "--fixtures-dir",
                str(fixtures_dir),
            ],
        )
        assert result.exit_code == 0
        assert "route: weather -> daily_weather (200 OK)" in result.output

    def test_route_current(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["route", "https://api.example/current_weather?lat=1"])
        assert result.exit_code == 0
        assert "current_weather -> current_weather" in result.output

    def test_route_unknown(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["route", "https://api.example/forecast"])
        assert result.exit_code == 1
