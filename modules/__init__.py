"""modules: Forecast, recommendation, search and wizard components."""
