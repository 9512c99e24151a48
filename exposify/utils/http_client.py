"""
HTTP client utilities for single-shot JSON GET requests.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Union

import requests

from exposify.config.settings import settings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

QueryResult = Union[Dict[str, Any], List[Any]]

_TOKEN_PATTERN = re.compile(r"(api_token=)[^&]*")


def redact(url: str) -> str:
    """Hide the API token in a URL before it reaches the logs."""
    return _TOKEN_PATTERN.sub(r"\1***", url)


class JsonFetcher:
    """Blocking GET + JSON decode that never raises.

    Every call opens and closes its own connection; there is no shared
    session. Transport and decode failures yield an empty dict.
    """

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout or settings.request_timeout

    def fetch(self, url: str) -> QueryResult:
        """Fetch ``url`` and return the decoded JSON body, or ``{}``."""
        logger.info(f"GET {redact(url)}")
        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning(f"Request to {redact(url)} failed: {exc.__class__.__name__}")
            return {}

        if not response.ok:
            # body is decoded regardless of status
            logger.warning(f"GET {redact(url)} returned HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError:
            logger.warning(f"Response from {redact(url)} is not valid JSON")
            return {}

        if data is None:
            return {}
        return data


# Global HTTP client instance
http_client = JsonFetcher()
