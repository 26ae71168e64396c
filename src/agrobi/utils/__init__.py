from .dates import add_months, month_label, parse_record_date
from .logs import configure_logging

__all__ = ["add_months", "month_label", "parse_record_date", "configure_logging"]
