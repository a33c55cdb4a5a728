from forecast_patterns.cli.main import app

app(prog_name="forecast-patterns")
