from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from agrobi.data.records import PriceRecord, records_from_frame
from agrobi.errors import ConnectorError

from .base import RecordConnector

logger = logging.getLogger(__name__)


def read_price_frame(source, *, date_col: str, region_col: str, price_col: str, name: str) -> pd.DataFrame:
    df = pd.read_csv(source)
    missing = [c for c in (date_col, region_col, price_col) if c not in df.columns]
    if missing:
        raise ConnectorError(f"{name} missing required columns: {missing}")
    return df


@dataclass(frozen=True)
class CSVRecordConnector(RecordConnector):
    path: str
    date_col: str = "data"
    region_col: str = "estado"
    price_col: str = "preco_leite_produtor"

    def load_frame(self) -> pd.DataFrame:
        path = Path(self.path)
        if not path.exists():
            raise ConnectorError(f"Price file not found: {path}")
        return read_price_frame(
            path,
            date_col=self.date_col,
            region_col=self.region_col,
            price_col=self.price_col,
            name=path.name,
        )

    def load_records(self) -> list[PriceRecord]:
        df = self.load_frame()
        records, _ = records_from_frame(
            df, date_col=self.date_col, price_col=self.price_col, region_col=self.region_col
        )
        logger.info(f"Loaded {len(records)} price records from {self.path}")
        return records
