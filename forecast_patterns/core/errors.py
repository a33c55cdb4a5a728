"""Base exception class for all forecast-patterns-specific errors."""


class ForecastPatternsError(Exception):
    """Base class for all forecast-patterns errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
