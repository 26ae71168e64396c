"""Deterministic price projection and the factor ranking shown beside it."""

from .factors import DEFAULT_FACTORS, FactorProvider, FeatureWeight, StaticFactorProvider, list_factors  # noqa
from .projector import DEFAULT_GROWTH_FACTOR, project  # noqa
from .series import ForecastPoint, ForecastSeries  # noqa

__all__ = [
    "DEFAULT_FACTORS",
    "DEFAULT_GROWTH_FACTOR",
    "FactorProvider",
    "FeatureWeight",
    "ForecastPoint",
    "ForecastSeries",
    "StaticFactorProvider",
    "list_factors",
    "project",
]
