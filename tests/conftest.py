"""Pytest configuration and shared fixtures."""

from datetime import date

import pandas as pd
import pytest

from agrobi.data import MonthlyAverage, PriceRecord


@pytest.fixture
def sample_records():
    """Two months of prices over three states, unordered, with gaps."""
    return [
        PriceRecord(date(2024, 2, 15), "MG", 2.20),
        PriceRecord(date(2024, 1, 5), "RS", 1.90),
        PriceRecord(date(2024, 1, 5), "MG", 2.10),
        PriceRecord(date(2024, 2, 1), "RS", 2.00),
        PriceRecord(date(2024, 1, 20), "SP", 0.0),  # not reported
        PriceRecord(date(2024, 2, 1), "SP", 2.10),
    ]


@pytest.fixture
def two_month_history():
    return [
        MonthlyAverage((2024, 1), date(2024, 1, 1), 2.00),
        MonthlyAverage((2024, 2), date(2024, 2, 1), 2.10),
    ]


@pytest.fixture
def raw_price_frame():
    return pd.DataFrame(
        {
            "data": ["05-01-2024", "05-01-2024", "31-02-2024", "05-02-2024", "bad", "05-03-2024"],
            "estado": ["MG", "RS", "MG", "MG", "SP", "SP"],
            "preco_leite_produtor": [2.0, 2.2, 2.5, "2.4", 1.0, 0.0],
        }
    )


@pytest.fixture
def price_csv(tmp_path):
    path = tmp_path / "milk.csv"
    path.write_text(
        "data,estado,preco_leite_produtor\n"
        "01-11-2024,MG,2.30\n"
        "01-11-2024,SP,2.50\n"
        "01-12-2024,MG,2.40\n"
        "01-12-2024,SP,0\n"
        "xx-12-2024,RS,2.90\n"
        "01-12-2024,RS,-1\n",
        encoding="utf-8",
    )
    return path
