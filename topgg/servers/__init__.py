"""topgg.servers - Paginated top.gg server listing scraper."""

from .api import TopGGScraper, get_servers
from .core import InvalidArgumentError, NetworkError, ParseError, ScraperError
from .models import (
    Entity,
    PostProcessOptions,
    QueryOptions,
    SearchResponse,
    SimplifiedEntity,
)
from .runtime.chunking import plan_chunks

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "get_servers",
    "TopGGScraper",
    "plan_chunks",
    # Models
    "Entity",
    "SimplifiedEntity",
    "SearchResponse",
    "QueryOptions",
    "PostProcessOptions",
    # Exceptions
    "ScraperError",
    "InvalidArgumentError",
    "NetworkError",
    "ParseError",
]
