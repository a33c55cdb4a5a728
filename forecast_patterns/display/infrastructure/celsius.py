"""CelsiusTemperature — the base component of the display chain."""

from forecast_patterns.core.formatting import format_number

CELSIUS_MARKER = "°C"


class CelsiusTemperature:
    """Displays a value as '<value>°C'.

    Satisfies the TemperatureDisplay protocol structurally.
    """

    def __init__(self, temperature: float) -> None:
        self._temperature = temperature

    def display(self) -> str:
        return f"{format_number(self._temperature)}{CELSIUS_MARKER}"
