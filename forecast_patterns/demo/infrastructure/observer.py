"""StructlogDemoObserver — production observer that delegates to structlog."""

import structlog


class StructlogDemoObserver:
    """Logs demo domain events to structlog.

    Does NOT inherit from DemoObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def demo_started(self, description: str) -> None:
        self._log.info("demo.started", description=description)

    def prototype_cloned(self, description: str) -> None:
        self._log.info("demo.prototype_cloned", description=description)

    def snapshot_saved(self, description: str) -> None:
        self._log.info("demo.snapshot_saved", description=description)

    def forecast_revised(self, previous: str, current: str) -> None:
        self._log.info("demo.forecast_revised", previous=previous, current=current)

    def snapshot_restored(self, description: str) -> None:
        self._log.info("demo.snapshot_restored", description=description)

    def demo_completed(self) -> None:
        self._log.info("demo.completed")
