from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date

import pandas as pd

from agrobi.errors import MalformedRecordError
from agrobi.utils.dates import parse_record_date

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PriceRecord:
    """One reported producer price for a region on a given day.

    A price of exactly 0 means "not reported"; such records are kept by the
    loaders but ignored by every aggregate.
    """

    date: date
    region: str
    price: float

    def __post_init__(self):
        if not isinstance(self.date, date):
            raise MalformedRecordError(f"Record date must be a date, got {self.date!r}")
        if isinstance(self.price, bool) or not isinstance(self.price, (int, float)):
            raise MalformedRecordError(f"Record price must be numeric, got {self.price!r}")
        if math.isnan(self.price) or math.isinf(self.price):
            raise MalformedRecordError(f"Record price is not finite: {self.price!r}")
        if self.price < 0:
            raise MalformedRecordError(f"Record price is negative: {self.price!r}")

    @property
    def month_key(self) -> tuple[int, int]:
        return (self.date.year, self.date.month)

    @property
    def is_reported(self) -> bool:
        return self.price > 0

    @classmethod
    def from_raw(cls, date_value, region, price) -> "PriceRecord":
        """Build a record from a raw row (date as ``dd-mm-yyyy``)."""
        try:
            d = parse_record_date(date_value)
        except ValueError as exc:
            raise MalformedRecordError(f"Unparsable record date: {date_value!r}") from exc

        try:
            p = float(price)
        except (TypeError, ValueError) as exc:
            raise MalformedRecordError(f"Unparsable record price: {price!r}") from exc

        region = region.strip() if isinstance(region, str) else ""
        return cls(date=d, region=region, price=p)


@dataclass(frozen=True)
class MonthlyAverage:
    """National mean of the reported prices within one calendar month."""

    month_key: tuple[int, int]
    representative_date: date
    mean_price: float


def records_from_frame(
    df: pd.DataFrame,
    *,
    date_col: str = "data",
    price_col: str = "preco_leite_produtor",
    region_col: str | None = "estado",
) -> tuple[list[PriceRecord], int]:
    """Convert raw rows to records, skipping malformed ones.

    Returns:
        (records, number of skipped rows)
    """
    dates = df[date_col].tolist()
    prices = df[price_col].tolist()
    regions = df[region_col].tolist() if region_col is not None else [""] * len(df)

    records: list[PriceRecord] = []
    skipped = 0
    for d, region, price in zip(dates, regions, prices):
        try:
            records.append(PriceRecord.from_raw(d, region, price))
        except MalformedRecordError as exc:
            skipped += 1
            logger.debug(f"Skipping row: {exc}")

    if skipped:
        logger.warning(f"Skipped {skipped} malformed row(s) out of {len(df)}")

    return records, skipped
