"""
NYC Open Data API Client - Pure I/O Operations

Fetches the NYC programs dataset and hands the raw body back to the caller.
Parsing and field extraction live in the transform layer.
"""

import requests
from typing import Optional
import logging

from src.coreutils.env import DEFAULT_PROGRAMS_URL
from src.coreutils.request import new_session, get_text

logger = logging.getLogger(__name__)

# API Endpoints
PROGRAMS_ENDPOINT = DEFAULT_PROGRAMS_URL


class NYCOpenDataClient:
    """API client for the NYC programs endpoint"""

    def __init__(
        self,
        url: str = PROGRAMS_ENDPOINT,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self._url = url
        self.timeout = timeout
        self.session = session or new_session()

    @property
    def url(self) -> str:
        return self._url

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def get_programs(self) -> str:
        """
        Fetch the programs dataset

        Returns:
            str: Raw response body, whatever the status code
        """
        logger.info(f"Fetching from {self.url}")

        try:
            return get_text(self.session, self.url, timeout=self.timeout)

        except requests.exceptions.RequestException as e:
            logger.error(f"Error fetching programs data: {e}")
            raise


# Convenience function for direct use
def fetch(url: str = PROGRAMS_ENDPOINT, timeout: Optional[float] = None) -> str:
    """Convenience function to get the raw programs body"""
    with NYCOpenDataClient(url=url, timeout=timeout) as client:
        return client.get_programs()
