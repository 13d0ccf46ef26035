"""Shared top.gg constants.

This module centralizes the base URL, search path and fixed query values
used by the search endpoint so the orchestrator can stay small.
"""

from __future__ import annotations

BASE_URL = "https://top.gg"

SEARCH_PATH = "/api/client/entities/search"

# Maximum number of entities the search endpoint returns per request
PAGE_CAP = 1000

# Fixed search parameters; this library only lists Discord servers
PLATFORM = "discord"
ENTITY_TYPE = "server"


def get_search_url(base_url: str = BASE_URL) -> str:
    """Get the absolute search endpoint URL.

    Args:
        base_url: Scheme and host of the API (no trailing slash needed)

    Returns:
        Search URL without a query string

    Examples:
        >>> get_search_url()
        'https://top.gg/api/client/entities/search'
    """
    return f"{base_url.rstrip('/')}{SEARCH_PATH}"
