"""Turning raw price rows into monthly series.

This module handles:
- Averaging reported prices per calendar month (national aggregate)
- Validating raw price tables before they reach the forecast layer
"""

from .aggregation import aggregate_frame_monthly, aggregate_monthly  # noqa
from .validation import DataValidationResult, validate_price_records  # noqa

__all__ = [
    "aggregate_monthly",
    "aggregate_frame_monthly",
    "validate_price_records",
    "DataValidationResult",
]
