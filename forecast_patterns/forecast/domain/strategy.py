"""ForecastStrategy Protocol — structural interface for forecast renderers."""

from typing import Protocol

from forecast_patterns.forecast.domain.forecast import Forecast


class ForecastStrategy(Protocol):
    """Renders a Forecast to the output stream.

    Implementations hold no state and are interchangeable at every call site.
    """

    def forecast(self, forecast: Forecast) -> None: ...
