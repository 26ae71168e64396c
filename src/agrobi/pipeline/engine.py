from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from agrobi.config import ProjectConfig
from agrobi.connectors import RecordConnector, connector_from_config
from agrobi.data.records import PriceRecord
from agrobi.forecast import (
    DEFAULT_GROWTH_FACTOR,
    FactorProvider,
    FeatureWeight,
    ForecastSeries,
    StaticFactorProvider,
    list_factors,
    project,
)
from agrobi.ingestion import aggregate_monthly
from agrobi.utils.dates import LabelStyle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForecastResult:
    series: ForecastSeries
    factors: list[FeatureWeight]

    def to_dict(self) -> dict:
        return {
            "seam_label": self.series.seam_label,
            "growth_factor": self.series.growth_factor,
            "points": self.series.to_records(),
            "factors": [{"name": f.name, "importance": f.importance} for f in self.factors],
        }


def _load(source: RecordConnector | Iterable[PriceRecord]) -> list[PriceRecord]:
    if isinstance(source, RecordConnector):
        return source.load_records()
    return list(source)


def generate_forecast(
    horizon_months: int,
    source: RecordConnector | Iterable[PriceRecord],
    *,
    growth_factor: float = DEFAULT_GROWTH_FACTOR,
    label_style: LabelStyle = "iso",
    factors: FactorProvider | None = None,
) -> ForecastResult:
    """Load -> aggregate -> project, recomputed from scratch on every call.

    Raises:
        NoHistoricalDataError: if the source has no reported month
    """
    records = _load(source)
    monthly = aggregate_monthly(records)
    series = project(monthly, horizon_months, growth_factor=growth_factor, label_style=label_style)
    return ForecastResult(series=series, factors=list_factors(factors))


class ForecastingEngine:
    """Runs forecasts with the parameters of a ProjectConfig."""

    def __init__(self, cfg: ProjectConfig, source: RecordConnector | None = None):
        self.cfg = cfg
        self.source = source if source is not None else connector_from_config(cfg.data)

    @property
    def factor_provider(self) -> FactorProvider:
        return StaticFactorProvider(
            tuple(FeatureWeight(name=f.name, importance=f.importance) for f in self.cfg.factors)
        )

    def forecast(self, horizon_months: int | None = None, *, growth_factor: float | None = None) -> ForecastResult:
        fc = self.cfg.forecast
        horizon = fc.default_horizon if horizon_months is None else int(horizon_months)
        if fc.allowed_horizons and horizon not in fc.allowed_horizons:
            raise ValueError(f"Unsupported horizon {horizon}; allowed: {fc.allowed_horizons}")

        factor = fc.growth_factor if growth_factor is None else growth_factor
        logger.info(f"Generating {horizon}-month forecast (growth_factor={factor})")
        return generate_forecast(
            horizon,
            self.source,
            growth_factor=factor,
            label_style=fc.label_style,
            factors=self.factor_provider,
        )
