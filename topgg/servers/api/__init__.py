"""High-level API facades."""

from .scraper_api import TopGGScraper, get_servers

__all__ = ["TopGGScraper", "get_servers"]
