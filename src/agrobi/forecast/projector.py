"""Fixed-ratio compounding projection from the last observed month.

This is a deterministic extrapolation, not a statistical forecast: every
projected value is the last monthly average multiplied by
``growth_factor ** i``. No uncertainty, seasonality or trend is modelled.
"""

from __future__ import annotations

import logging
import math
from numbers import Integral
from typing import Sequence

import numpy as np

from agrobi.data.records import MonthlyAverage
from agrobi.errors import NoHistoricalDataError
from agrobi.utils.dates import LabelStyle, add_months, month_label

from .series import ForecastPoint, ForecastSeries

logger = logging.getLogger(__name__)

DEFAULT_GROWTH_FACTOR = 1.02


def project(
    monthly: Sequence[MonthlyAverage],
    horizon_months: int,
    *,
    growth_factor: float = DEFAULT_GROWTH_FACTOR,
    label_style: LabelStyle = "iso",
) -> ForecastSeries:
    """Extend a monthly series ``horizon_months`` steps into the future.

    Args:
        monthly: Monthly averages (re-sorted by month; not mutated)
        horizon_months: Number of projected months; 0 gives an empty tail
        growth_factor: Per-month multiplicative rate (1.02 = +2% per month)
        label_style: "iso" (2024-02) or "pt_br" (fev/24)

    Returns:
        ForecastSeries with one historical point per month followed by one
        projected point per step. The seam is the last historical label.

    Raises:
        NoHistoricalDataError: if ``monthly`` is empty
        ValueError: on repeated months, a negative or non-integer horizon, or a
            growth factor that is not a positive finite number
    """
    history = sorted(monthly, key=lambda m: m.month_key)
    if not history:
        raise NoHistoricalDataError("No monthly history available to anchor a forecast")
    keys = [m.month_key for m in history]
    repeated = sorted({k for k in keys if keys.count(k) > 1})
    if repeated:
        raise ValueError(f"Monthly history repeats month(s) {repeated}")
    if isinstance(horizon_months, bool) or not isinstance(horizon_months, Integral):
        raise ValueError(f"horizon_months must be an integer, got {horizon_months!r}")
    if horizon_months < 0:
        raise ValueError(f"horizon_months must be >= 0, got {horizon_months}")
    if not math.isfinite(growth_factor) or growth_factor <= 0:
        raise ValueError(f"growth_factor must be a positive finite number, got {growth_factor}")

    points = [
        ForecastPoint(
            label=month_label(m.representative_date, label_style),
            date=m.representative_date,
            historical_value=m.mean_price,
        )
        for m in history
    ]

    last = history[-1]
    steps = np.arange(1, int(horizon_months) + 1)
    values = last.mean_price * np.power(float(growth_factor), steps)
    for step, value in zip(steps, values):
        target = add_months(last.representative_date, int(step))
        points.append(
            ForecastPoint(
                label=month_label(target, label_style),
                date=target,
                projected_value=float(value),
            )
        )

    seam_index = len(history) - 1
    seam_label = points[seam_index].label
    logger.info(
        f"Projected {horizon_months} month(s) from {seam_label} "
        f"(last={last.mean_price:.4f}, factor={growth_factor})"
    )
    return ForecastSeries(
        points=tuple(points),
        seam_label=seam_label,
        growth_factor=growth_factor,
        seam_index=seam_index,
    )
