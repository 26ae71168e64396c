from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from agrobi.data.records import PriceRecord


class RecordConnector(ABC):
    """Loads a flat sequence of price records from some source."""

    @abstractmethod
    def load_records(self) -> list[PriceRecord]:
        raise NotImplementedError


class InMemoryRecordConnector(RecordConnector):
    def __init__(self, records: Iterable[PriceRecord]):
        self._records = tuple(records)

    def load_records(self) -> list[PriceRecord]:
        # Fresh list per call so callers never alias the stored rows.
        return list(self._records)
