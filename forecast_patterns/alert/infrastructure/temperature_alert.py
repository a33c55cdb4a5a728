"""TemperatureAlert — prints a warning when the temperature is over 15 degrees."""

import typer

ALERT_THRESHOLD = 15
ALERT_MESSAGE = "Temperature is predicted to be over 15 degrees!"


class TemperatureAlert:
    """Writes ALERT_MESSAGE to stdout when notified of a temperature above 15.

    The comparison is strict: exactly 15 is silent.
    Does NOT inherit from TemperatureObserver (structural typing via Protocol).
    """

    def update(self, temperature: float) -> None:
        if temperature > ALERT_THRESHOLD:
            typer.echo(ALERT_MESSAGE)
