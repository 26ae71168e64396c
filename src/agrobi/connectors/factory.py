from __future__ import annotations

from agrobi.config import DataConfig

from .base import RecordConnector
from .bundled import BundledRecordConnector
from .csv_connector import CSVRecordConnector


def connector_from_config(cfg: DataConfig) -> RecordConnector:
    if cfg.milk_prices_path:
        return CSVRecordConnector(
            path=cfg.milk_prices_path,
            date_col=cfg.date_col,
            region_col=cfg.region_col,
            price_col=cfg.price_col,
        )
    return BundledRecordConnector()
