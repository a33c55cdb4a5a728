"""Observer port for the demo domain — defines events in domain language."""

from typing import Protocol


class DemoObserver(Protocol):
    """Observer port emitting structured events while a demo run progresses.

    Implementations may log to structlog or record for tests.
    """

    def demo_started(self, description: str) -> None: ...

    def prototype_cloned(self, description: str) -> None: ...

    def snapshot_saved(self, description: str) -> None: ...

    def forecast_revised(self, previous: str, current: str) -> None: ...

    def snapshot_restored(self, description: str) -> None: ...

    def demo_completed(self) -> None: ...
