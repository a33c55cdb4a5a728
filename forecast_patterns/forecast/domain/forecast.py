"""Forecast — the mutable originator that produces and restores snapshots."""

from dataclasses import dataclass

from forecast_patterns.forecast.domain.snapshot import ForecastSnapshot
from forecast_patterns.forecast.domain.values import ForecastValues


@dataclass
class Forecast:
    """Mutable weather forecast owned by a single demo run."""

    description: str
    day_temperature: float
    night_temperature: float
    humidity: float

    @classmethod
    def from_values(cls, values: ForecastValues) -> "Forecast":
        return cls(
            description=values.description,
            day_temperature=values.day_temperature,
            night_temperature=values.night_temperature,
            humidity=values.humidity,
        )

    def apply(self, values: ForecastValues) -> None:
        """Overwrite every field with the given values."""
        self.description = values.description
        self.day_temperature = values.day_temperature
        self.night_temperature = values.night_temperature
        self.humidity = values.humidity

    def save(self) -> ForecastSnapshot:
        """Capture the current field values in a new immutable snapshot."""
        return ForecastSnapshot(
            description=self.description,
            day_temperature=self.day_temperature,
            night_temperature=self.night_temperature,
            humidity=self.humidity,
        )

    def restore(self, snapshot: ForecastSnapshot) -> None:
        """Overwrite all four fields with the values held by snapshot."""
        self.description = snapshot.description
        self.day_temperature = snapshot.day_temperature
        self.night_temperature = snapshot.night_temperature
        self.humidity = snapshot.humidity

    def to_values(self) -> ForecastValues:
        return ForecastValues(
            description=self.description,
            day_temperature=self.day_temperature,
            night_temperature=self.night_temperature,
            humidity=self.humidity,
        )
