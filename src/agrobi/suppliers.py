"""Supplier scorecard: the partners the purchasing team buys milk from."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import pandas as pd

from agrobi.connectors.bundled import SUPPLIERS, resource_path
from agrobi.errors import ConnectorError

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("supplier_id", "name", "region", "quality", "monthly_volume_l", "last_price", "rating")


@dataclass(frozen=True)
class Supplier:
    supplier_id: int
    name: str
    region: str
    quality: int
    monthly_volume_l: int
    last_price: float
    rating: float  # historical performance score, 0-5

    @property
    def sap_uid(self) -> str:
        return f"SAP_UID_{self.supplier_id}"

    @property
    def volume_display(self) -> str:
        if self.monthly_volume_l >= 1000:
            return f"{self.monthly_volume_l / 1000:g}k L"
        return f"{self.monthly_volume_l} L"


def load_suppliers(path: str | Path | None = None) -> list[Supplier]:
    if path is None:
        with resource_path(SUPPLIERS).open("r", encoding="utf-8") as fh:
            df = pd.read_csv(fh)
    else:
        path = Path(path)
        if not path.exists():
            raise ConnectorError(f"Supplier file not found: {path}")
        df = pd.read_csv(path)

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ConnectorError(f"Supplier table missing required columns: {missing}")

    suppliers = [
        Supplier(
            supplier_id=int(row.supplier_id),
            name=str(row.name),
            region=str(row.region),
            quality=int(row.quality),
            monthly_volume_l=int(row.monthly_volume_l),
            last_price=float(row.last_price),
            rating=float(row.rating),
        )
        for row in df.itertuples(index=False)
    ]
    logger.info(f"Loaded {len(suppliers)} suppliers")
    return suppliers


def search_suppliers(suppliers: Iterable[Supplier], query: str | None) -> list[Supplier]:
    """Case-insensitive match on supplier name or region code."""
    needle = (query or "").strip().lower()
    if not needle:
        return list(suppliers)
    return [s for s in suppliers if needle in s.name.lower() or needle in s.region.lower()]


def scorecard_frame(suppliers: Iterable[Supplier]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Fornecedor": s.name,
                "UID": s.sap_uid,
                "UF": s.region,
                "Volume de Leite/Mês": s.volume_display,
                "Último preço praticado": f"R$ {s.last_price:.2f}",
                "Score": s.rating,
            }
            for s in suppliers
        ],
        columns=["Fornecedor", "UID", "UF", "Volume de Leite/Mês", "Último preço praticado", "Score"],
    )
