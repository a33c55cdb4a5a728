"""structlog configuration for the CLI."""

import sys

import structlog

LOG_FORMATS = ("console", "json")


def configure_structlog(log_format: str) -> None:
    """Configure structlog to render to stderr in the requested format.

    stdout is reserved for the forecast lines, so logs never go there.

    Raises:
        ValueError: if log_format is not 'console' or 'json'.
    """
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer(
            colors=False
        )
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        raise ValueError(
            f"Invalid log format: {log_format!r}. Must be 'console' or 'json'."
        )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
