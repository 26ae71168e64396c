from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import pandas as pd


@dataclass(frozen=True)
class ForecastPoint:
    label: str
    date: date
    historical_value: float | None = None
    projected_value: float | None = None

    @property
    def is_projected(self) -> bool:
        return self.projected_value is not None


@dataclass(frozen=True)
class ForecastSeries:
    """Observed history followed by the projected tail, chronologically.

    Points up to and including ``seam_label`` carry only ``historical_value``;
    points after it carry only ``projected_value``.
    """

    points: tuple[ForecastPoint, ...]
    seam_label: str
    growth_factor: float
    seam_index: int

    @property
    def historical(self) -> tuple[ForecastPoint, ...]:
        return self.points[: self.seam_index + 1]

    @property
    def projected(self) -> tuple[ForecastPoint, ...]:
        return self.points[self.seam_index + 1 :]

    @property
    def labels(self) -> list[str]:
        return [p.label for p in self.points]

    def to_records(self) -> list[dict]:
        return [
            {
                "label": p.label,
                "date": p.date.isoformat(),
                "historical_value": p.historical_value,
                "projected_value": p.projected_value,
            }
            for p in self.points
        ]

    def to_frame(self) -> pd.DataFrame:
        df = pd.DataFrame(
            self.to_records(), columns=["label", "date", "historical_value", "projected_value"]
        )
        df["date"] = pd.to_datetime(df["date"])
        return df

    def to_chart_frame(self) -> pd.DataFrame:
        """``to_frame`` plus a ``projection_line`` column for plotting.

        The projection line starts at the seam's historical value so the two
        traces meet. ``projected_value`` itself is left untouched.
        """
        df = self.to_frame()
        df["projection_line"] = df["projected_value"]
        if self.projected:
            df.loc[self.seam_index, "projection_line"] = df.loc[self.seam_index, "historical_value"]
        return df
