"""
Client for the Exposify real-estate listing API.
"""

from exposify.clients import ApiClient, Exposify, PropertyPresenter
from exposify.models.schemas import RenderedContent
from exposify.utils.http_client import JsonFetcher

__all__ = [
    "Exposify",
    "ApiClient",
    "PropertyPresenter",
    "RenderedContent",
    "JsonFetcher",
]

__version__ = "1.0.0"
