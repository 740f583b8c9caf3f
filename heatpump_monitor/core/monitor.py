"""
Heat Pump Monitor - entry points used by the outer application layer

Flow:
1. Fetch the listing page
2. Assemble one ProductRecord per product card
3. Persist the records to the CSV history table
4. Later, decode the table and compute summary statistics
"""

import csv
import logging
from typing import List, Optional

from .aggregator import summarize_records
from .config import MonitorConfig
from .csv_codec import read_records, write_records
from .html_fetcher import HTMLFetcher
from .models import ListingResult, ProductRecord, SummaryStatistics
from .record_assembler import extract_products

logger = logging.getLogger(__name__)


class HeatPumpMonitor:
    """
    Scrapes the heat pump listing and summarizes the stored history

    Errors are logged and re-raised: FetchError for transport problems,
    OSError for the CSV file, ValueError for rows that fail to decode.
    """

    def __init__(
        self,
        config: Optional[MonitorConfig] = None,
        fetcher=None,
        log_level: int = logging.INFO
    ):
        """
        Initialize the monitor

        Args:
            config: Monitor configuration (defaults to MonitorConfig())
            fetcher: Object with fetch(url) -> str; an HTMLFetcher is built if None
            log_level: Logging level
        """
        logging.basicConfig(
            level=log_level,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        self.config = config or MonitorConfig()
        self.fetcher = fetcher or HTMLFetcher(
            user_agent=self.config.user_agent,
            timeout=self.config.timeout,
            max_retries=self.config.max_retries
        )

    def fetch_current_listings(self) -> List[ProductRecord]:
        """Fetch the live listing page and extract its products"""
        try:
            html = self.fetcher.fetch(self.config.scrape_url)
        except Exception as e:
            logger.error(f"Error scraping heat pump data: {e}")
            raise

        products = extract_products(html, manufacturer=self.config.manufacturer)
        logger.info(f"Extracted {len(products)} heat pumps")
        return products

    def save_listings(self, products: List[ProductRecord], csv_path: Optional[str] = None) -> int:
        """Overwrite the history table with products"""
        path = csv_path or self.config.csv_path
        try:
            return write_records(products, path)
        except OSError as e:
            logger.error(f"CSV save failed: {e}")
            raise

    def scrape_and_save(self) -> ListingResult:
        """Fetch the current listings and persist them immediately"""
        products = self.fetch_current_listings()
        self.save_listings(products)
        return ListingResult(products=products)

    def summarize(
        self,
        csv_path: Optional[str] = None,
        top_feature_limit: Optional[int] = None
    ) -> SummaryStatistics:
        """
        Decode the history table and compute summary statistics

        Args:
            csv_path: Table to read (defaults to config.csv_path)
            top_feature_limit: How many top features to report (defaults to config)
        """
        path = csv_path or self.config.csv_path
        limit = self.config.top_feature_limit if top_feature_limit is None else top_feature_limit

        try:
            records = read_records(path)
        except (OSError, ValueError, csv.Error) as e:
            logger.error(f"Error generating heat pump summary: {e}")
            raise

        return summarize_records(records, top_feature_limit=limit)

    def close(self) -> None:
        close = getattr(self.fetcher, 'close', None)
        if close:
            close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
