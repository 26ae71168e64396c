"""Purchasing intelligence for agribusiness commodities.

Monthly aggregation of producer prices, a deterministic compounding
projection and the descriptive indicators behind the dashboard.
"""

from .config import ProjectConfig, load_config
from .errors import NoHistoricalDataError
from .pipeline import ForecastingEngine, generate_forecast
