"""
Monitor configuration
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from . import page_selectors as selectors

DEFAULT_SCRAPE_URL = (
    'https://www.screwfix.com/c/heating-plumbing/air-sourced-heat-pumps/cat14210002?brand=samsung'
)
DEFAULT_USER_AGENT = 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36'


@dataclass
class MonitorConfig:
    """Where to scrape from, where the history table lives, and transport limits"""
    scrape_url: str = DEFAULT_SCRAPE_URL
    csv_path: str = 'heat_pumps.csv'
    manufacturer: str = selectors.DEFAULT_MANUFACTURER
    timeout: int = 30
    max_retries: int = 3
    user_agent: str = DEFAULT_USER_AGENT
    top_feature_limit: int = 5

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'MonitorConfig':
        """
        Build a config from environment variables

        Recognised: HEATPUMP_SCRAPE_URL, HEATPUMP_CSV_PATH,
        HEATPUMP_TIMEOUT, HEATPUMP_MAX_RETRIES
        """
        env = os.environ if environ is None else environ
        config = cls()

        if env.get('HEATPUMP_SCRAPE_URL'):
            config.scrape_url = env['HEATPUMP_SCRAPE_URL']
        if env.get('HEATPUMP_CSV_PATH'):
            config.csv_path = env['HEATPUMP_CSV_PATH']
        if env.get('HEATPUMP_TIMEOUT'):
            config.timeout = int(env['HEATPUMP_TIMEOUT'])
        if env.get('HEATPUMP_MAX_RETRIES'):
            config.max_retries = int(env['HEATPUMP_MAX_RETRIES'])

        return config
