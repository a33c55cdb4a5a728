"""TemperatureDisplay Protocol — the component contract of the display chain."""

from typing import Protocol


class TemperatureDisplay(Protocol):
    """Anything that renders a temperature as a unit-suffixed string."""

    def display(self) -> str: ...
