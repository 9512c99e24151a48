from __future__ import annotations

import json
from typing import Any, List, Optional, Tuple

import pytest
import requests

from exposify.utils.http_client import JsonFetcher


def make_response(body: Any = None, status_code: int = 200, raw: Optional[bytes] = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.encoding = "utf-8"
    if raw is not None:
        response._content = raw
    else:
        response._content = json.dumps(body).encode("utf-8")
    return response


class FakeTransport:
    """Stands in for ``requests.get`` and records every call."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Any]] = []
        self._response: Optional[requests.Response] = make_response({})
        self._error: Optional[Exception] = None

    def respond(self, body: Any = None, status_code: int = 200, raw: Optional[bytes] = None) -> None:
        self._response = make_response(body, status_code=status_code, raw=raw)
        self._error = None

    def fail(self, error: Exception) -> None:
        self._error = error

    @property
    def urls(self) -> List[str]:
        return [url for url, _ in self.calls]

    def __call__(self, url: str, timeout: Any = None, **kwargs: Any) -> requests.Response:
        self.calls.append((url, timeout))
        if self._error is not None:
            raise self._error
        return self._response


@pytest.fixture
def transport(monkeypatch: pytest.MonkeyPatch) -> FakeTransport:
    fake = FakeTransport()
    monkeypatch.setattr(requests, "get", fake)
    return fake


@pytest.fixture
def fetcher() -> JsonFetcher:
    return JsonFetcher(timeout=5)


@pytest.fixture
def listing_payload() -> dict:
    return {
        "html": "&lt;div class=&quot;exposify&quot;&gt;Altbau &amp; Balkon&lt;/div&gt;",
        "title": "3-Zimmer-Wohnung in Berlin",
        "description": "Helle Wohnung mit Balkon",
        "css": ["https://cdn.exposify.de/a.css", "https://cdn.exposify.de/b.css"],
        "js": ["https://cdn.exposify.de/app.js"],
    }
