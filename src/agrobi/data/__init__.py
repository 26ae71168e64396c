from .records import MonthlyAverage, PriceRecord, records_from_frame

__all__ = ["MonthlyAverage", "PriceRecord", "records_from_frame"]
