"""ForecastDemo — runs every pattern in sequence against one mutable Forecast."""

import typer

from forecast_patterns.alert.domain.observer import TemperatureObserver
from forecast_patterns.alert.infrastructure.composite_observer import (
    CompositeTemperatureObserver,
)
from forecast_patterns.alert.infrastructure.observer import (
    StructlogTemperatureObserver,
)
from forecast_patterns.alert.infrastructure.temperature_alert import TemperatureAlert
from forecast_patterns.demo.domain.observer import DemoObserver
from forecast_patterns.demo.domain.result import DemoResult
from forecast_patterns.demo.infrastructure.observer import StructlogDemoObserver
from forecast_patterns.display.domain.temperature import TemperatureDisplay
from forecast_patterns.display.infrastructure.celsius import CelsiusTemperature
from forecast_patterns.display.infrastructure.fahrenheit import (
    FahrenheitTemperatureDecorator,
)
from forecast_patterns.forecast.domain.forecast import Forecast
from forecast_patterns.forecast.domain.prototype import ForecastPrototype
from forecast_patterns.forecast.domain.snapshot import ForecastSnapshot
from forecast_patterns.forecast.domain.strategy import ForecastStrategy
from forecast_patterns.forecast.domain.values import ForecastValues
from forecast_patterns.forecast.infrastructure.strategies import (
    DetailedForecastStrategy,
    SimpleForecastStrategy,
)

INITIAL_FORECAST = ForecastValues(
    description="Sunny",
    day_temperature=20,
    night_temperature=10,
    humidity=60,
)
REVISED_FORECAST = ForecastValues(
    description="Cloudy",
    day_temperature=18,
    night_temperature=8,
    humidity=70,
)


class ForecastDemo:
    """Drives the fixed demo script.

    The Forecast and the observer list are created inside run() and live only
    for that call. Nothing raised along the way is caught here; in particular
    a TemperatureParseError from the display chain propagates to the caller.
    """

    def __init__(
        self,
        observer: DemoObserver,
        temperature_observers: list[TemperatureObserver] | None = None,
    ) -> None:
        self._observer = observer
        self._extra_temperature_observers = list(temperature_observers or [])

    def run(self) -> DemoResult:
        """Execute the demo script and return what it produced."""
        simple_strategy = SimpleForecastStrategy()
        detailed_strategy = DetailedForecastStrategy()

        forecast = Forecast.from_values(INITIAL_FORECAST)
        observers = CompositeTemperatureObserver(observers=[])
        observers.register(TemperatureAlert())
        for extra in self._extra_temperature_observers:
            observers.register(extra)
        self._observer.demo_started(description=forecast.description)

        self._render_and_notify(
            strategy=simple_strategy, forecast=forecast, observers=observers
        )

        prototype = ForecastPrototype.from_forecast(forecast).clone()
        self._observer.prototype_cloned(description=prototype.description)

        celsius: TemperatureDisplay = CelsiusTemperature(forecast.day_temperature)
        celsius_display = celsius.display()
        typer.echo(f"Temperature: {celsius_display}")
        fahrenheit: TemperatureDisplay = FahrenheitTemperatureDecorator(celsius)
        fahrenheit_display = fahrenheit.display()
        typer.echo(f"Temperature: {fahrenheit_display}")

        snapshot = forecast.save()
        self._observer.snapshot_saved(description=snapshot.description)

        forecast.apply(REVISED_FORECAST)
        self._observer.forecast_revised(
            previous=snapshot.description, current=forecast.description
        )
        self._render_and_notify(
            strategy=detailed_strategy, forecast=forecast, observers=observers
        )

        forecast.restore(snapshot)
        self._observer.snapshot_restored(description=forecast.description)
        self._render_and_notify(
            strategy=simple_strategy, forecast=forecast, observers=observers
        )

        self._observer.demo_completed()
        return DemoResult(
            snapshot=_values_of(snapshot),
            prototype=_values_of(prototype),
            celsius_display=celsius_display,
            fahrenheit_display=fahrenheit_display,
            restored=forecast.to_values(),
        )

    def _render_and_notify(
        self,
        strategy: ForecastStrategy,
        forecast: Forecast,
        observers: TemperatureObserver,
    ) -> None:
        strategy.forecast(forecast=forecast)
        observers.update(temperature=forecast.day_temperature)


def run_demo() -> DemoResult:
    """Run the demo script with structlog observers.

    Configure structlog first (see configure_structlog) to keep log output
    off stdout.
    """
    demo = ForecastDemo(
        observer=StructlogDemoObserver(),
        temperature_observers=[StructlogTemperatureObserver()],
    )
    return demo.run()


def _values_of(item: ForecastSnapshot | ForecastPrototype) -> ForecastValues:
    return ForecastValues(
        description=item.description,
        day_temperature=item.day_temperature,
        night_temperature=item.night_temperature,
        humidity=item.humidity,
    )
