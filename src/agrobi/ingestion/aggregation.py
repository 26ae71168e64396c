"""Aggregation of dated price records into monthly national averages."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable

import pandas as pd

from agrobi.data.records import MonthlyAverage, PriceRecord, records_from_frame

logger = logging.getLogger(__name__)


def aggregate_monthly(records: Iterable[PriceRecord]) -> list[MonthlyAverage]:
    """Average reported prices per calendar month, across all regions.

    Args:
        records: Price records in any order; duplicates allowed.

    Returns:
        One MonthlyAverage per (year, month) present, ascending by month.
        Records with a price of 0 ("not reported") are ignored. If nothing
        qualifies the result is empty and the caller decides what to do.
    """
    rows = [(r.date.year, r.date.month, r.price) for r in records if r.price > 0]
    if not rows:
        logger.info("No reported prices to aggregate")
        return []

    df = pd.DataFrame(rows, columns=["year", "month", "price"])
    grouped = df.groupby(["year", "month"], sort=True)["price"].agg(["sum", "count"])

    result = [
        MonthlyAverage(
            month_key=(int(year), int(month)),
            representative_date=date(int(year), int(month), 1),
            mean_price=float(total) / int(count),
        )
        for (year, month), total, count in zip(grouped.index, grouped["sum"], grouped["count"])
    ]

    logger.info(
        f"Aggregated {len(rows)} reported prices to {len(result)} monthly averages "
        f"({result[0].month_key} to {result[-1].month_key})"
    )
    return result


def aggregate_frame_monthly(
    df: pd.DataFrame,
    date_col: str = "data",
    price_col: str = "preco_leite_produtor",
    region_col: str | None = "estado",
) -> list[MonthlyAverage]:
    """Same as aggregate_monthly, straight from a raw table.

    Rows with an unparsable date or a non-numeric / negative price are skipped
    (and counted in the log) rather than failing the whole aggregation.
    """
    for col in (date_col, price_col):
        if col not in df.columns:
            raise ValueError(f"Column '{col}' not found in input DataFrame")
    if region_col is not None and region_col not in df.columns:
        region_col = None

    records, _ = records_from_frame(df, date_col=date_col, price_col=price_col, region_col=region_col)
    return aggregate_monthly(records)
