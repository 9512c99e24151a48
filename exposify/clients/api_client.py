"""Exposify API client.

One client instance talks to one API surface (the JSON API or the HTML API),
identified by its base URL and secret key. Requests go through a
:class:`~exposify.utils.http_client.JsonFetcher`, so they never raise; a
failed request yields an empty dict.

Notes
-----
* URL components are interpolated verbatim. Neither the query, the slug nor
  the key is percent-encoded before it is appended to the base URL.
* The last decoded result is kept on the instance and replaced by every
  request. Instances are not safe for concurrent use; callers that need
  isolation should use the return value of the request methods instead of
  :meth:`ApiClient.get_result`.
"""

from __future__ import annotations

import logging
from typing import Optional

from exposify.utils.http_client import JsonFetcher, QueryResult, http_client

logger = logging.getLogger(__name__)


class ApiClient:
    """HTTP client for one Exposify endpoint."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        fetcher: Optional[JsonFetcher] = None,
    ) -> None:
        self._base_url = base_url
        self._api_key = api_key
        self.fetcher = fetcher or http_client
        self._result: QueryResult = {}

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def api_key(self) -> str:
        return self._api_key

    # ------------------------------------------------------------------
    # URL builders
    # ------------------------------------------------------------------
    def build_search_url(self, query: str) -> str:
        return f"{self._base_url}?api_token={self._api_key}&query={query}"

    def build_property_url(self, slug: str) -> str:
        return f"{self._base_url}/{slug}?api_token={self._api_key}"

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------
    def _request(self, url: str) -> QueryResult:
        result = self.fetcher.fetch(url)
        self._result = result
        logger.debug("Stored %s result from %s", type(result).__name__, self._base_url)
        return result

    def search_properties(self, query: str) -> QueryResult:
        """Request all properties matching ``query``.

        The decoded body (usually a list of listings) is stored and returned.
        """
        return self._request(self.build_search_url(query))

    def fetch_property(self, slug: str) -> QueryResult:
        """Request a single property by its slug.

        The decoded body (usually one listing object) is stored and returned.
        """
        return self._request(self.build_property_url(slug))

    def get_result(self) -> QueryResult:
        """Return the result of the last finished request, ``{}`` if none."""
        return self._result
