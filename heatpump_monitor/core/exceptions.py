"""Failure signals raised to callers of the monitor"""

from typing import Optional


class HeatPumpMonitorError(Exception):
    """Base class for monitor errors"""


class FetchError(HeatPumpMonitorError):
    """The listing page could not be retrieved (network, timeout or HTTP status)"""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        super().__init__(f"Failed to fetch {url}: {message}")
