"""Static datasets shipped inside the package.

The dashboard has no live market-data feed; these tables are the whole data
universe unless a CSV path is configured.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import resources

import pandas as pd

from agrobi.data.records import PriceRecord, records_from_frame

from .base import RecordConnector
from .csv_connector import read_price_frame

logger = logging.getLogger(__name__)

MILK_PRICES = "milk_prices.csv"
AGRO_PRODUCTS = "agro_products.csv"
SUPPLIERS = "suppliers.csv"


def resource_path(name: str):
    return resources.files("agrobi") / "resources" / name


@dataclass(frozen=True)
class BundledRecordConnector(RecordConnector):
    resource: str = MILK_PRICES

    def load_frame(self) -> pd.DataFrame:
        with resource_path(self.resource).open("r", encoding="utf-8") as fh:
            return read_price_frame(
                fh,
                date_col="data",
                region_col="estado",
                price_col="preco_leite_produtor",
                name=self.resource,
            )

    def load_records(self) -> list[PriceRecord]:
        records, _ = records_from_frame(self.load_frame())
        logger.info(f"Loaded {len(records)} bundled price records ({self.resource})")
        return records


def load_agro_products() -> pd.DataFrame:
    with resource_path(AGRO_PRODUCTS).open("r", encoding="utf-8") as fh:
        return pd.read_csv(fh)
