"""Structlog implementation of the TemperatureObserver port."""

import structlog


class StructlogTemperatureObserver:
    """Logs every temperature notification to structlog.

    Satisfies the TemperatureObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def update(self, temperature: float) -> None:
        self._log.info("alert.temperature_notified", temperature=temperature)
