from .engine import ForecastingEngine, ForecastResult, generate_forecast

__all__ = ["ForecastingEngine", "ForecastResult", "generate_forecast"]
