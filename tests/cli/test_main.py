"""Tests for the forecast-patterns CLI."""

from typer.testing import CliRunner

from forecast_patterns.cli.main import app

EXPECTED_OUTPUT = [
    "Simple Weather Forecast: Sunny, Day Temp: 20, Night Temp: 10, Humidity: 60",
    "Temperature is predicted to be over 15 degrees!",
    "Temperature: 20°C",
    "Temperature: 68°F",
    "Detailed Weather Forecast: Cloudy, Day Temp: 18, Night Temp: 8, Humidity: 70",
    "Temperature is predicted to be over 15 degrees!",
    "Simple Weather Forecast: Sunny, Day Temp: 20, Night Temp: 10, Humidity: 60",
    "Temperature is predicted to be over 15 degrees!",
]

runner = CliRunner()


def _demo_lines(output: str) -> list[str]:
    """Keep only lines that belong to the demo script, dropping log lines."""
    wanted = set(EXPECTED_OUTPUT)
    return [line for line in output.splitlines() if line in wanted]


class TestRunCommand:
    """Running without arguments prints the script and exits 0."""

    def test_default_run_succeeds(self) -> None:
        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert _demo_lines(result.stdout) == EXPECTED_OUTPUT

    def test_json_log_format_succeeds(self) -> None:
        result = runner.invoke(app, ["--log-format", "json"])

        assert result.exit_code == 0
        assert _demo_lines(result.stdout) == EXPECTED_OUTPUT


class TestRunCommandErrors:
    """Bad invocations exit non-zero."""

    def test_invalid_log_format_exits_1(self) -> None:
        result = runner.invoke(app, ["--log-format", "xml"])

        assert result.exit_code == 1
        assert "Invalid log format" in result.output

    def test_scenario_option_is_rejected(self) -> None:
        result = runner.invoke(app, ["--scenario", "heatwave.yaml"])

        assert result.exit_code == 2
        assert _demo_lines(result.stdout) == []
