"""Market factors ranked by their (static) influence on price.

The weights are hand-authored and not derived from the price data. A real
derivation, e.g. regression coefficients, plugs in as another FactorProvider.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class FeatureWeight:
    name: str
    importance: float  # percent; weights need not sum to 100


DEFAULT_FACTORS: tuple[FeatureWeight, ...] = (
    FeatureWeight("Custo da Ração", 45),
    FeatureWeight("Câmbio (Dólar)", 25),
    FeatureWeight("Clima", 15),
    FeatureWeight("Demanda Interna", 10),
    FeatureWeight("Exportações", 5),
)


class FactorProvider(ABC):
    @abstractmethod
    def list_factors(self) -> list[FeatureWeight]:
        """Return factors sorted ascending by importance.

        Smallest first: a horizontal bar chart draws the largest bar on top.
        """

        raise NotImplementedError


@dataclass(frozen=True)
class StaticFactorProvider(FactorProvider):
    weights: tuple[FeatureWeight, ...] = DEFAULT_FACTORS

    def list_factors(self) -> list[FeatureWeight]:
        return sorted(self.weights, key=lambda w: w.importance)


def list_factors(provider: FactorProvider | None = None) -> list[FeatureWeight]:
    return (provider or StaticFactorProvider()).list_factors()
