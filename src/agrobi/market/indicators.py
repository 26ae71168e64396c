"""Descriptive indicators for the analytical dashboard.

Everything here only summarises what was reported; zero prices are treated as
"not reported" and never enter an average, minimum or maximum.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable

import pandas as pd

from agrobi.data.records import PriceRecord
from agrobi.utils.dates import LabelStyle, month_label

logger = logging.getLogger(__name__)

AGRO_INDEX_COLUMNS = {
    "indice_precos_graos": "Grãos",
    "indice_precos_pecuaria": "Pecuária",
    "indice_precos_hortifruti": "Hortifruti",
    "indice_precos_canacafe": "Cana & Café",
}


@dataclass(frozen=True)
class MilkKPIs:
    national_average: float
    max_price: float
    min_price: float
    regions_reporting: int
    latest_date: date | None


@dataclass(frozen=True)
class AgroKPIs:
    dollar: float
    live_cattle: float


def _frame(records: Iterable[PriceRecord]) -> pd.DataFrame:
    rows = [(r.date, r.region, r.price) for r in records]
    return pd.DataFrame(rows, columns=["date", "region", "price"])


def milk_kpis(records: Iterable[PriceRecord]) -> MilkKPIs:
    """Headline numbers: latest national average, extremes, reporting regions.

    The latest date is taken over all records, reported or not, so a day on
    which every region reported 0 yields an average of 0.
    """
    df = _frame(records)
    if df.empty:
        return MilkKPIs(0.0, 0.0, 0.0, 0, None)

    latest = df["date"].max()
    reported = df[df["price"] > 0]
    latest_rows = reported[reported["date"] == latest]

    return MilkKPIs(
        national_average=float(latest_rows["price"].mean()) if not latest_rows.empty else 0.0,
        max_price=float(reported["price"].max()) if not reported.empty else 0.0,
        min_price=float(reported["price"].min()) if not reported.empty else 0.0,
        regions_reporting=int(latest_rows["region"].nunique()),
        latest_date=latest,
    )


def list_regions(records: Iterable[PriceRecord]) -> list[str]:
    return sorted({r.region for r in records if r.region})


def average_by_region(records: Iterable[PriceRecord]) -> pd.DataFrame:
    """Mean reported price per region, cheapest first."""
    df = _frame(records)
    df = df[(df["price"] > 0) & (df["region"] != "")]
    out = df.groupby("region", as_index=False)["price"].mean()
    out = out.rename(columns={"price": "mean_price"})
    return out.sort_values("mean_price", kind="stable").reset_index(drop=True)


def average_by_year(records: Iterable[PriceRecord]) -> pd.DataFrame:
    df = _frame(records)
    df = df[df["price"] > 0]
    df = df.assign(year=[d.year for d in df["date"]])
    out = df.groupby("year", as_index=False)["price"].mean()
    out = out.rename(columns={"price": "mean_price"})
    return out.sort_values("year").reset_index(drop=True)


def region_evolution(
    records: Iterable[PriceRecord], region: str, label_style: LabelStyle = "pt_br"
) -> pd.DataFrame:
    """Chronological reported prices for a single region."""
    df = _frame(records)
    df = df[(df["region"] == region) & (df["price"] > 0)]
    df = df.sort_values("date", kind="stable").reset_index(drop=True)
    df["label"] = [month_label(d, label_style) for d in df["date"]]
    return df[["date", "label", "price"]]


def _agro_month(value) -> pd.Timestamp:
    # Source dates are written yyyy-dd-mm: the month sits in the last component.
    year, _, month = str(value).split("-")
    return pd.Timestamp(year=int(year), month=int(month), day=1)


def prepare_agro_frame(df: pd.DataFrame, label_style: LabelStyle = "pt_br") -> pd.DataFrame:
    """Attach a month column and a display label to the agro index table."""
    months = []
    for value in df["data"]:
        try:
            months.append(_agro_month(value))
        except ValueError:
            months.append(pd.NaT)

    out = df.copy()
    out["month"] = months
    dropped = int(out["month"].isna().sum())
    if dropped:
        logger.warning(f"Dropping {dropped} agro rows with unparsable dates")
    out = out.dropna(subset=["month"]).sort_values("month").reset_index(drop=True)
    out["label"] = [month_label(m.date(), label_style) for m in out["month"]]
    return out


def agro_kpis(df: pd.DataFrame) -> AgroKPIs:
    if df.empty:
        return AgroKPIs(dollar=0.0, live_cattle=0.0)
    latest = df.iloc[-1]

    def _value(col: str) -> float:
        v = latest.get(col)
        return float(v) if v is not None and pd.notna(v) else 0.0

    return AgroKPIs(dollar=_value("Dolar"), live_cattle=_value("valor_boigordo"))
