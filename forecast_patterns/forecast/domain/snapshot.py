"""ForecastSnapshot memento — a captured Forecast state."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ForecastSnapshot:
    """Immutable capture of a Forecast's four fields at save time.

    Holds copies of the values only; it keeps no reference to the Forecast
    that produced it.
    """

    description: str
    day_temperature: float
    night_temperature: float
    humidity: float
