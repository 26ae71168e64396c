from datetime import date

import pandas as pd
import pytest

from agrobi.data import PriceRecord
from agrobi.market import (
    agro_kpis,
    average_by_region,
    average_by_year,
    list_regions,
    milk_kpis,
    prepare_agro_frame,
    region_evolution,
)


@pytest.fixture
def records():
    return [
        PriceRecord(date(2023, 6, 1), "MG", 2.00),
        PriceRecord(date(2023, 6, 1), "SP", 2.60),
        PriceRecord(date(2024, 1, 1), "MG", 2.20),
        PriceRecord(date(2024, 1, 1), "SP", 0.0),
        PriceRecord(date(2024, 1, 1), "RS", 2.40),
        PriceRecord(date(2023, 12, 1), "RS", 1.70),
        PriceRecord(date(2023, 12, 1), "", 5.00),
    ]


def test_milk_kpis(records):
    kpis = milk_kpis(records)
    assert kpis.latest_date == date(2024, 1, 1)
    assert kpis.national_average == pytest.approx(2.30)
    assert kpis.max_price == pytest.approx(5.00)
    assert kpis.min_price == pytest.approx(1.70)
    assert kpis.regions_reporting == 2


def test_milk_kpis_empty():
    kpis = milk_kpis([])
    assert (kpis.national_average, kpis.max_price, kpis.min_price, kpis.regions_reporting) == (0.0, 0.0, 0.0, 0)
    assert kpis.latest_date is None


def test_milk_kpis_latest_day_unreported():
    kpis = milk_kpis([PriceRecord(date(2024, 1, 1), "MG", 2.0), PriceRecord(date(2024, 2, 1), "MG", 0.0)])
    assert kpis.national_average == 0.0
    assert kpis.regions_reporting == 0
    assert kpis.max_price == 2.0


def test_list_regions_skips_blank(records):
    assert list_regions(records) == ["MG", "RS", "SP"]


def test_average_by_region_cheapest_first(records):
    df = average_by_region(records)
    assert df["region"].tolist() == ["RS", "MG", "SP"]
    assert df["mean_price"].tolist() == pytest.approx([2.05, 2.10, 2.60])


def test_average_by_year(records):
    df = average_by_year(records)
    assert df["year"].tolist() == [2023, 2024]
    assert df["mean_price"].tolist() == pytest.approx([(2.0 + 2.6 + 1.7 + 5.0) / 4, 2.30])


def test_region_evolution(records):
    df = region_evolution(records, "SP")
    assert df["label"].tolist() == ["jun/23"]
    df = region_evolution(records, "MG", label_style="iso")
    assert df["label"].tolist() == ["2023-06", "2024-01"]
    assert df["price"].tolist() == [2.0, 2.2]


def test_prepare_agro_frame_reads_month_from_last_component():
    raw = pd.DataFrame(
        {
            "data": ["2024-01-02", "2024-01-01", "junk"],
            "Dolar": [5.1, 5.0, 9.9],
            "valor_boigordo": [250.0, 245.0, 1.0],
        }
    )
    df = prepare_agro_frame(raw)
    assert df["label"].tolist() == ["jan/24", "fev/24"]
    assert df["Dolar"].tolist() == [5.0, 5.1]

    kpis = agro_kpis(df)
    assert kpis.dollar == 5.1
    assert kpis.live_cattle == 250.0


def test_agro_kpis_missing_values():
    assert agro_kpis(pd.DataFrame()).dollar == 0.0
    kpis = agro_kpis(pd.DataFrame({"Dolar": [float("nan")]}))
    assert (kpis.dollar, kpis.live_cattle) == (0.0, 0.0)
