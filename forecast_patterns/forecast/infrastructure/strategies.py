"""Concrete forecast strategies that write a one-line summary to stdout."""

import typer

from forecast_patterns.core.formatting import format_number
from forecast_patterns.forecast.domain.forecast import Forecast


def _render(preamble: str, forecast: Forecast) -> str:
    return (
        f"{preamble}: {forecast.description},"
        f" Day Temp: {format_number(forecast.day_temperature)},"
        f" Night Temp: {format_number(forecast.night_temperature)},"
        f" Humidity: {format_number(forecast.humidity)}"
    )


class SimpleForecastStrategy:
    """Writes the 'Simple Weather Forecast' line.

    Satisfies the ForecastStrategy protocol structurally.
    """

    def render(self, forecast: Forecast) -> str:
        return _render(preamble="Simple Weather Forecast", forecast=forecast)

    def forecast(self, forecast: Forecast) -> None:
        typer.echo(self.render(forecast=forecast))


class DetailedForecastStrategy:
    """Writes the 'Detailed Weather Forecast' line.

    Satisfies the ForecastStrategy protocol structurally.
    """

    def render(self, forecast: Forecast) -> str:
        return _render(preamble="Detailed Weather Forecast", forecast=forecast)

    def forecast(self, forecast: Forecast) -> None:
        typer.echo(self.render(forecast=forecast))
