"""TemperatureObserver port — subscribers notified of a forecast temperature."""

from typing import Protocol


class TemperatureObserver(Protocol):
    """Observer port for temperature notifications.

    Notification is synchronous and caller-driven: the demo calls update()
    explicitly with the forecast's day temperature. Implementations must not
    mutate the forecast.
    """

    def update(self, temperature: float) -> None: ...
