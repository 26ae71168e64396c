"""Quality checks for raw producer-price tables."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import pandas as pd

from agrobi.utils.dates import RECORD_DATE_FORMAT

logger = logging.getLogger(__name__)


@dataclass
class DataValidationResult:
    """Results of validating a raw price table."""

    is_valid: bool
    num_records: int
    dataset: str = ""
    date_range: tuple[str, str] | None = None
    regions: list[str] = field(default_factory=list)
    unreported: int = 0
    skipped: int = 0
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    summary: str = ""

    def __str__(self) -> str:
        status = "✓ VALID" if self.is_valid else "✗ INVALID"
        lines = [
            f"{status} | {self.dataset}",
            f"  Records: {self.num_records} ({self.skipped} skipped, {self.unreported} not reported)",
        ]
        if self.date_range:
            lines.append(f"  Date range: {self.date_range[0]} to {self.date_range[1]}")
        if self.regions:
            lines.append(f"  Regions ({len(self.regions)}): {', '.join(self.regions)}")
        if self.warnings:
            lines.append(f"  ⚠ Warnings ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"    - {w}")
        if self.errors:
            lines.append(f"  ✗ Errors ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"    - {e}")
        return "\n".join(lines)


def validate_price_records(
    df: pd.DataFrame,
    date_col: str = "data",
    region_col: str = "estado",
    price_col: str = "preco_leite_produtor",
    dataset: str = "milk_prices",
) -> DataValidationResult:
    """Validate a raw price table before aggregation.

    Checks:
    - Non-empty DataFrame
    - Required columns present
    - Dates parse as dd-mm-yyyy
    - Prices numeric and non-negative
    - At least one reported (positive) price

    Rows failing the date or price checks are skipped downstream, so they are
    reported as warnings. The table is only invalid when nothing usable
    remains.
    """
    result = DataValidationResult(is_valid=True, num_records=len(df), dataset=dataset)

    if df.empty:
        result.errors.append("DataFrame is empty")
        result.is_valid = False
        result.summary = "Empty dataset"
        return result

    missing = [c for c in (date_col, region_col, price_col) if c not in df.columns]
    if missing:
        result.errors.append(f"Missing required columns: {missing}")
        result.is_valid = False
        result.summary = "Missing columns"
        return result

    dates = pd.to_datetime(df[date_col], format=RECORD_DATE_FORMAT, errors="coerce")
    prices = pd.to_numeric(df[price_col], errors="coerce")

    bad_dates = int(dates.isna().sum())
    if bad_dates:
        result.warnings.append(f"{bad_dates} unparsable dates (expected dd-mm-yyyy)")

    bad_prices = int(prices.isna().sum())
    if bad_prices:
        result.warnings.append(f"{bad_prices} non-numeric prices")

    negative = int((prices < 0).sum())
    if negative:
        result.warnings.append(f"{negative} negative prices")

    usable = dates.notna() & prices.notna() & (prices >= 0)
    result.skipped = int((~usable).sum())

    reported = usable & (prices > 0)
    result.unreported = int((usable & (prices == 0)).sum())
    if result.unreported:
        result.warnings.append(f"{result.unreported} zero prices (treated as not reported)")

    if not reported.any():
        result.errors.append("No reported prices available")
        result.is_valid = False
    else:
        result.date_range = (
            dates[reported].min().strftime("%Y-%m-%d"),
            dates[reported].max().strftime("%Y-%m-%d"),
        )

    regions = df.loc[reported, region_col].dropna().astype(str).str.strip()
    result.regions = sorted(r for r in regions.unique() if r)

    if result.errors:
        result.summary = f"{len(result.errors)} validation error(s)"
    elif result.warnings:
        result.summary = f"Valid with {len(result.warnings)} warning(s)"
    else:
        result.summary = "All checks passed"

    logger.info(f"{dataset}: {result.summary}")
    return result
