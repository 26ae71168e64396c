from pathlib import Path

import pytest
from pydantic import ValidationError

from agrobi.config import ProjectConfig, load_config

DEFAULT_YAML = Path(__file__).resolve().parents[1] / "configs" / "default.yaml"


def test_defaults_without_file():
    cfg = load_config()
    assert cfg.forecast.growth_factor == 1.02
    assert cfg.forecast.allowed_horizons == [1, 3, 6]
    assert cfg.data.milk_prices_path is None
    assert [f.name for f in cfg.factors][0] == "Custo da Ração"


def test_shipped_yaml_matches_defaults():
    assert load_config(DEFAULT_YAML) == ProjectConfig()


def test_partial_yaml_overrides(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text(
        "forecast:\n  growth_factor: 1.05\n  label_style: pt_br\nlogging:\n  level: DEBUG\n",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.forecast.growth_factor == 1.05
    assert cfg.forecast.label_style == "pt_br"
    assert cfg.forecast.default_horizon == 3
    assert cfg.logging.level == "DEBUG"


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == ProjectConfig()


@pytest.mark.parametrize(
    "forecast",
    [
        {"growth_factor": 0},
        {"default_horizon": 2},
        {"label_style": "us"},
        {"default_horizon": -1, "allowed_horizons": []},
    ],
)
def test_invalid_forecast_settings(forecast):
    with pytest.raises(ValidationError):
        ProjectConfig.model_validate({"forecast": forecast})


def test_negative_factor_rejected():
    with pytest.raises(ValidationError):
        ProjectConfig.model_validate({"factors": [{"name": "Clima", "importance": -1}]})
