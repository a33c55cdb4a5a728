"""ForecastPrototype — a standalone forecast value that can copy itself."""

from dataclasses import dataclass

from forecast_patterns.forecast.domain.forecast import Forecast


@dataclass
class ForecastPrototype:
    """Mutable forecast copy, independent of any Forecast originator.

    All fields are scalars, so a field-wise copy shares no mutable state.
    """

    description: str
    day_temperature: float
    night_temperature: float
    humidity: float

    @classmethod
    def from_forecast(cls, forecast: Forecast) -> "ForecastPrototype":
        return cls(
            description=forecast.description,
            day_temperature=forecast.day_temperature,
            night_temperature=forecast.night_temperature,
            humidity=forecast.humidity,
        )

    def clone(self) -> "ForecastPrototype":
        return ForecastPrototype(
            description=self.description,
            day_temperature=self.day_temperature,
            night_temperature=self.night_temperature,
            humidity=self.humidity,
        )
