"""Core monitoring modules"""

from .monitor import HeatPumpMonitor
from .config import MonitorConfig
from .html_fetcher import HTMLFetcher
from .models import ProductRecord, SummaryStatistics, ListingResult
from .record_assembler import extract_products
from .csv_codec import read_records, write_records
from .aggregator import summarize_records, parse_price
from .exceptions import HeatPumpMonitorError, FetchError

__all__ = [
    "HeatPumpMonitor",
    "MonitorConfig",
    "HTMLFetcher",
    "ProductRecord",
    "SummaryStatistics",
    "ListingResult",
    "extract_products",
    "read_records",
    "write_records",
    "summarize_records",
    "parse_price",
    "HeatPumpMonitorError",
    "FetchError"
]
