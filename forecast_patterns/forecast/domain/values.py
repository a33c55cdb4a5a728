"""ForecastValues — validated input values for building or revising a Forecast."""

from pydantic import BaseModel, ConfigDict, Field


class ForecastValues(BaseModel):
    """Immutable, validated set of the four forecast fields.

    Used as a cross-layer DTO: the demo script declares its forecasts with it,
    the Forecast originator consumes it and DemoResult reports it back.
    """

    model_config = ConfigDict(frozen=True)

    description: str = Field(min_length=1)
    day_temperature: float
    night_temperature: float
    humidity: float = Field(ge=0, le=100)
