"""Error types raised by display infrastructure."""

from forecast_patterns.core.errors import ForecastPatternsError


class TemperatureParseError(ForecastPatternsError):
    """Raised when a wrapped display string cannot be read back as Celsius."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(
            f"Failed to parse temperature: '{text}' is not a Celsius reading"
        )
