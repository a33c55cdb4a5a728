"""FahrenheitTemperatureDecorator — re-renders a Celsius display in Fahrenheit."""

from forecast_patterns.core.formatting import format_number
from forecast_patterns.display.domain.temperature import TemperatureDisplay
from forecast_patterns.display.infrastructure.celsius import CELSIUS_MARKER
from forecast_patterns.display.infrastructure.errors import TemperatureParseError

FAHRENHEIT_MARKER = "°F"


class FahrenheitTemperatureDecorator:
    """Wraps a TemperatureDisplay and shows its reading in Fahrenheit.

    The wrapped display() output is parsed back into a number by stripping
    trailing '°' and 'C' characters, whatever the wrapped component is. Only a
    single level of wrapping around a Celsius display is supported: wrapping
    another FahrenheitTemperatureDecorator raises TemperatureParseError
    because '°F' is not stripped.

    Satisfies the TemperatureDisplay protocol structurally.
    """

    def __init__(self, temperature_component: TemperatureDisplay) -> None:
        self._temperature_component = temperature_component

    def display(self) -> str:
        celsius = self._temperature_component.display()
        fahrenheit = _convert_to_fahrenheit(celsius=celsius)
        return f"{format_number(fahrenheit)}{FAHRENHEIT_MARKER}"


def _convert_to_fahrenheit(celsius: str) -> float:
    """Parse a '<value>°C' string and convert it to Fahrenheit.

    Raises:
        TemperatureParseError: if the stripped text is not a number.
    """
    stripped = celsius.rstrip(CELSIUS_MARKER)
    try:
        celsius_value = float(stripped)
    except ValueError as exc:
        raise TemperatureParseError(text=celsius) from exc
    return celsius_value * 9 / 5 + 32
