"""
Rendering helpers for the Exposify HTML API.
"""

import html
import logging
from typing import Any, List, Optional

from exposify.clients.api_client import ApiClient
from exposify.models.schemas import RenderedContent
from exposify.utils.http_client import JsonFetcher, QueryResult

logger = logging.getLogger(__name__)

NOT_FOUND_HTML = (
    "<h1>404 :(</h1>"
    "<p>Wir können diese Immobilie leider nicht finden.</p>"
)


class PropertyPresenter:
    """
    Fetches pre-rendered listing fragments and renders them for a host page.
    Accessors only read the last fetched result; they never trigger a request.
    """

    def __init__(self, base_url: str, api_key: str, fetcher: Optional[JsonFetcher] = None):
        self.client = ApiClient(base_url, api_key, fetcher=fetcher)

    @property
    def base_url(self) -> str:
        return self.client.base_url

    @property
    def api_key(self) -> str:
        return self.client.api_key

    def search_properties(self, query: str) -> QueryResult:
        return self.client.search_properties(query)

    def fetch_property(self, slug: str) -> QueryResult:
        return self.client.fetch_property(slug)

    def get_result(self) -> QueryResult:
        return self.client.get_result()

    def _field(self, name: str) -> Any:
        result = self.client.get_result()
        if not isinstance(result, dict):
            return None
        return result.get(name)

    def render_content(self) -> RenderedContent:
        """Return the listing markup, or the not-found fragment with status 404."""
        if not self.client.get_result():
            logger.info("No property result available, rendering 404 fragment")
            return RenderedContent(html=NOT_FOUND_HTML, status_code=404)

        markup = self._field("html")
        if not isinstance(markup, str):
            return RenderedContent(html="")
        return RenderedContent(html=html.unescape(markup))

    def render_title(self) -> str:
        title = self._field("title")
        return title if isinstance(title, str) else ""

    def render_description(self) -> str:
        description = self._field("description")
        return description if isinstance(description, str) else ""

    def render_style_tags(self) -> List[str]:
        """One stylesheet link per entry of ``css``, in order."""
        sources = self._field("css")
        if not isinstance(sources, list):
            return []
        return [f'<link rel="stylesheet" href="{src}">' for src in sources]

    def render_script_tags(self) -> List[str]:
        """One closed script tag per entry of ``js``, in order."""
        sources = self._field("js")
        if not isinstance(sources, list):
            return []
        return [f'<script src="{src}"></script>' for src in sources]

    def render_head(self) -> str:
        return "".join(self.render_style_tags())

    def render_scripts(self) -> str:
        return "".join(self.render_script_tags())
