"""
Exposify entry point: the JSON API client with the HTML API attached.
"""

import logging
from typing import Optional

from exposify.clients.api_client import ApiClient
from exposify.clients.html_presenter import PropertyPresenter
from exposify.config.settings import settings
from exposify.utils.http_client import JsonFetcher, QueryResult

logger = logging.getLogger(__name__)

API_BASE_URL = "https://app.exposify.de/api/beta/"
HTML_API_BASE_URL = "https://app.exposify.de/html-api"


class Exposify:
    """
    Single entry point for Exposify.
    Handles the JSON API directly and exposes the HTML API as ``html``.
    """

    def __init__(self, api_key: Optional[str] = None, fetcher: Optional[JsonFetcher] = None):
        self.api_key = api_key if api_key is not None else settings.api_key
        self.fetcher = fetcher or JsonFetcher()
        self.api = ApiClient(API_BASE_URL, self.api_key, fetcher=self.fetcher)
        self.html = PropertyPresenter(HTML_API_BASE_URL, self.api_key, fetcher=self.fetcher)

        if not self.api_key:
            logger.warning("Exposify API key not configured; requests will return no data.")

    def search_properties(self, query: str) -> QueryResult:
        return self.api.search_properties(query)

    def fetch_property(self, slug: str) -> QueryResult:
        return self.api.fetch_property(slug)

    def get_result(self) -> QueryResult:
        return self.api.get_result()
