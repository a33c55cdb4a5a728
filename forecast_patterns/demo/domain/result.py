"""DemoResult — what a completed demo run produced."""

from pydantic import BaseModel, ConfigDict

from forecast_patterns.forecast.domain.values import ForecastValues


class DemoResult(BaseModel):
    """Immutable summary returned when a demo run completes."""

    model_config = ConfigDict(frozen=True)

    snapshot: ForecastValues
    prototype: ForecastValues
    celsius_display: str
    fahrenheit_display: str
    restored: ForecastValues
