"""CompositeTemperatureObserver — fans out a notification to a list of observers."""

from forecast_patterns.alert.domain.observer import TemperatureObserver


class CompositeTemperatureObserver:
    """Delegates every update to each observer in registration order.

    Does NOT inherit from TemperatureObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[TemperatureObserver]) -> None:
        self._observers = list(observers)

    def register(self, observer: TemperatureObserver) -> None:
        self._observers.append(observer)

    def update(self, temperature: float) -> None:
        for obs in self._observers:
            obs.update(temperature=temperature)
