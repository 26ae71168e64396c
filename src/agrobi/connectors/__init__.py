from .base import InMemoryRecordConnector, RecordConnector
from .bundled import BundledRecordConnector, load_agro_products, resource_path
from .csv_connector import CSVRecordConnector
from .factory import connector_from_config

__all__ = [
    "RecordConnector",
    "InMemoryRecordConnector",
    "BundledRecordConnector",
    "CSVRecordConnector",
    "connector_from_config",
    "load_agro_products",
    "resource_path",
]
