"""top.gg connector: configuration and the entity search endpoint."""

from .config import BASE_URL, PAGE_CAP
from .rest.endpoints import build_page

__all__ = ["BASE_URL", "PAGE_CAP", "build_page"]
