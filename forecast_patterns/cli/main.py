"""CLI entrypoint for forecast-patterns — typer app with a single `run` command."""

import sys

import typer

from forecast_patterns.core.errors import ForecastPatternsError
from forecast_patterns.core.logging import configure_structlog
from forecast_patterns.demo.application.driver import run_demo

app = typer.Typer(add_completion=False)


@app.command()
def run(
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Walk a weather forecast through the Memento, Observer, Strategy,
    Prototype and Decorator patterns, printing each step to stdout.
    """
    try:
        configure_structlog(log_format=log_format)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    try:
        run_demo()
    except ForecastPatternsError as exc:
        typer.echo(str(exc), err=True)
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.", err=True)
        sys.exit(1)


if __name__ == "__main__":
    app()
