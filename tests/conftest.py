"""Shared pytest fixtures."""

from collections.abc import Iterator, MutableMapping
from typing import Any

import pytest
import structlog
from structlog.testing import capture_logs


@pytest.fixture(autouse=True)
def log_output() -> Iterator[list[MutableMapping[str, Any]]]:
    """Capture structlog events instead of printing them, and reset afterwards."""
    structlog.reset_defaults()
    with capture_logs() as captured:
        yield captured
    structlog.reset_defaults()
