from .api_client import ApiClient
from .html_presenter import NOT_FOUND_HTML, PropertyPresenter
from .exposify_client import Exposify

__all__ = [
    "ApiClient",
    "PropertyPresenter",
    "NOT_FOUND_HTML",
    "Exposify",
]
