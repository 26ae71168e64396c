import pytest

from agrobi.auth import MISSING_FIELDS_MESSAGE, authenticate
from agrobi.errors import ConnectorError
from agrobi.suppliers import Supplier, load_suppliers, scorecard_frame, search_suppliers


def test_bundled_suppliers():
    suppliers = load_suppliers()
    assert len(suppliers) == 9
    first = suppliers[0]
    assert first.name == "Cooperativa Sul-Leite"
    assert first.sap_uid == "SAP_UID_34491"
    assert first.volume_display == "120k L"


def test_search_by_name_or_region():
    suppliers = load_suppliers()
    assert [s.region for s in search_suppliers(suppliers, "mg")] == ["MG", "MG", "MG"]
    assert [s.name for s in search_suppliers(suppliers, "horizonte")] == ["Laticínios Horizonte"]
    assert len(search_suppliers(suppliers, "  ")) == 9
    assert search_suppliers(suppliers, "zzz") == []


def test_scorecard_frame_formats_prices():
    s = Supplier(1, "Fazenda X", "MG", 90, 800, 2.5, 4.0)
    df = scorecard_frame([s])
    row = df.iloc[0]
    assert row["Último preço praticado"] == "R$ 2.50"
    assert row["Volume de Leite/Mês"] == "800 L"
    assert row["UID"] == "SAP_UID_1"


def test_scorecard_frame_empty_keeps_columns():
    assert list(scorecard_frame([]).columns)[0] == "Fornecedor"


def test_load_suppliers_errors(tmp_path):
    with pytest.raises(ConnectorError):
        load_suppliers(tmp_path / "missing.csv")
    bad = tmp_path / "bad.csv"
    bad.write_text("supplier_id,name\n1,X\n", encoding="utf-8")
    with pytest.raises(ConnectorError, match="missing required columns"):
        load_suppliers(bad)


@pytest.mark.parametrize(
    "email,password,ok",
    [
        ("a@b.com", "secret", True),
        ("x", "y", True),
        ("", "secret", False),
        ("a@b.com", "   ", False),
        (None, None, False),
    ],
)
def test_authenticate_accepts_any_non_empty_pair(email, password, ok):
    result = authenticate(email, password)
    assert result.ok is ok
    assert result.message == ("" if ok else MISSING_FIELDS_MESSAGE)
