# blitz_backend/services/template_fetcher.py
import logging
from typing import Optional

import requests

from blitz_backend.core.errors import UpstreamFetchError

logger = logging.getLogger(__name__)


class TemplateFetcher:
    """Downloads the default entrypoint file for new bots."""

    def __init__(self, url: str, timeout: float = 10.0,
                 session: Optional[requests.Session] = None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch(self) -> str:
        try:
            response = self.session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Template fetch from {self.url} failed: {e}")
            raise UpstreamFetchError(
                f"Failed to fetch bot template: {e}") from e
        return response.text
