"""
HTML Fetcher with CloudScraper
Fetches the listing page; transport failures surface as FetchError
"""

import logging
from typing import Optional
import cloudscraper
from cloudscraper.exceptions import CloudflareException, CaptchaException
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import DEFAULT_USER_AGENT
from .exceptions import FetchError

logger = logging.getLogger(__name__)


class HTMLFetcher:
    """Fetches HTML over a browser-like session with bounded retries"""

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: int = 30,
        max_retries: int = 3,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize HTML Fetcher

        Args:
            user_agent: User-Agent header sent with every request
            timeout: Request timeout in seconds
            max_retries: Retry attempts for 429/5xx responses and connection errors
            session: Pre-built session (a CloudScraper session is created if None)
        """
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_retries = max_retries
        self.session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """Create CloudScraper session with retry adapter"""
        session = cloudscraper.create_scraper(
            browser={
                'browser': 'chrome',
                'platform': 'windows',
                'mobile': False
            }
        )
        session.headers.update({
            'User-Agent': self.user_agent,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': 'en-GB,en;q=0.9',
        })

        retry_strategy = Retry(
            total=self.max_retries,
            status_forcelist=[429, 500, 502, 503, 504],
            backoff_factor=1,
            raise_on_status=False
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def fetch(self, url: str) -> str:
        """
        Fetch HTML content from URL

        Returns:
            Response body as text

        Raises:
            FetchError: connection failure, timeout, Cloudflare block, or non-2xx status
        """
        logger.info(f"Fetching: {url}")

        try:
            response = self.session.get(url, timeout=self.timeout)
        except (requests.RequestException, CloudflareException, CaptchaException) as e:
            logger.error(f"Fetch failed: {e}")
            raise FetchError(url, str(e)) from e

        if not 200 <= response.status_code < 300:
            logger.error(f"Fetch failed with status {response.status_code}")
            raise FetchError(url, f"HTTP {response.status_code}", status_code=response.status_code)

        logger.info(f"Success: {response.status_code} ({len(response.text)} bytes)")
        return response.text

    def close(self) -> None:
        """Close the session"""
        if self.session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
