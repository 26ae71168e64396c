from __future__ import annotations

from datetime import date, datetime
from typing import Literal

import pandas as pd

LabelStyle = Literal["iso", "pt_br"]

PT_BR_MONTHS = ("jan", "fev", "mar", "abr", "mai", "jun", "jul", "ago", "set", "out", "nov", "dez")

RECORD_DATE_FORMAT = "%d-%m-%Y"


def parse_record_date(value) -> date:
    """Parse a raw record date (``dd-mm-yyyy``) into a calendar day.

    Raises:
        ValueError: if the value cannot be read as (year, month, day)
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unsupported date value: {value!r}")
    return datetime.strptime(value.strip(), RECORD_DATE_FORMAT).date()


def add_months(d: date, months: int) -> date:
    # Calendar increment with year rollover; day is pinned to the 1st.
    return (pd.Period(year=d.year, month=d.month, freq="M") + months).start_time.date()


def month_label(d: date, style: LabelStyle = "iso") -> str:
    if style == "iso":
        return f"{d.year:04d}-{d.month:02d}"
    if style == "pt_br":
        return f"{PT_BR_MONTHS[d.month - 1]}/{d.year % 100:02d}"
    raise ValueError(f"Unknown label style: {style}")
