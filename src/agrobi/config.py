from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, model_validator


class ProjectMeta(BaseModel):
    name: str = "agrobi"


class DataConfig(BaseModel):
    # None means the dataset bundled with the package.
    milk_prices_path: str | None = None
    suppliers_path: str | None = None
    date_col: str = "data"
    region_col: str = "estado"
    price_col: str = "preco_leite_produtor"


class ForecastConfig(BaseModel):
    growth_factor: float = Field(default=1.02, gt=0)
    default_horizon: int = Field(default=3, ge=0)
    # Empty list disables the check.
    allowed_horizons: list[int] = Field(default_factory=lambda: [1, 3, 6])
    label_style: Literal["iso", "pt_br"] = "iso"

    @model_validator(mode="after")
    def _default_is_allowed(self) -> "ForecastConfig":
        if self.allowed_horizons and self.default_horizon not in self.allowed_horizons:
            raise ValueError(
                f"default_horizon {self.default_horizon} not in allowed_horizons {self.allowed_horizons}"
            )
        return self


class FactorConfig(BaseModel):
    name: str
    importance: float = Field(ge=0)


def _default_factors() -> list[FactorConfig]:
    return [
        FactorConfig(name="Custo da Ração", importance=45),
        FactorConfig(name="Câmbio (Dólar)", importance=25),
        FactorConfig(name="Clima", importance=15),
        FactorConfig(name="Demanda Interna", importance=10),
        FactorConfig(name="Exportações", importance=5),
    ]


class LLMConfig(BaseModel):
    model: str = "gemini-3-pro-preview"
    api_key_env: str = "GEMINI_API_KEY"
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    timeout_sec: int = 60
    max_retries: int = Field(default=2, ge=1)
    thinking_budget: int = 2000


class LoggingConfig(BaseModel):
    level: str = "INFO"


class ProjectConfig(BaseModel):
    project: ProjectMeta = ProjectMeta()
    data: DataConfig = DataConfig()
    forecast: ForecastConfig = ForecastConfig()
    factors: list[FactorConfig] = Field(default_factory=_default_factors)
    llm: LLMConfig = LLMConfig()
    logging: LoggingConfig = LoggingConfig()


def load_config(path: str | Path | None = None) -> ProjectConfig:
    if path is None:
        return ProjectConfig()
    path = Path(path)
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return ProjectConfig.model_validate(data)
