"""top.gg entity search endpoint definition and adapter.

The endpoint pages with ``amount``/``skip`` and caps ``amount`` at 1000.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from topgg.servers.connectors.topgg.config import (
    BASE_URL,
    ENTITY_TYPE,
    PAGE_CAP,
    PLATFORM,
    get_search_url,
)
from topgg.servers.core.exceptions import ParseError
from topgg.servers.models import SearchResponse
from topgg.servers.runtime.chunking import ChunkPolicy
from topgg.servers.runtime.rest import ResponseAdapter, RestEndpointSpec, build_url


def _search_path(params: dict[str, Any]) -> str:
    return get_search_url(params.get("base_url", BASE_URL))


def build_query(params: dict[str, Any]) -> list[tuple[str, Any]]:
    """Build query parameters for the search endpoint.

    ``q`` and ``tags`` lead the query string and are left out entirely
    when absent. Values are not escaped.
    """
    q: list[tuple[str, Any]] = []
    if params.get("query") is not None:
        q.append(("q", params["query"]))
    if params.get("tags") is not None:
        q.append(("tags", params["tags"]))
    q.extend(
        [
            ("platform", PLATFORM),
            ("entityType", ENTITY_TYPE),
            ("amount", params["amount"]),
            ("skip", params["skip"]),
        ]
    )
    return q


def _create_chunk_policy(params: dict[str, Any]) -> ChunkPolicy:
    """Create chunk policy for the endpoint."""
    return ChunkPolicy(
        max_points=params.get("page_cap", PAGE_CAP),
        skip_empty_chunks=params.get("skip_empty_chunks", True),
    )


# Endpoint specification
SPEC = RestEndpointSpec(
    id="entity_search",
    build_path=_search_path,
    build_query=build_query,
    chunk_policy=_create_chunk_policy,
)


@dataclass(frozen=True)
class PageRequest:
    """URL for one page and how far the skip offset moves after it."""

    url: str
    skip_delta: int


def build_page(
    chunk_size: int,
    skip: int = 0,
    tags: str | None = None,
    query: str | None = None,
    base_url: str = BASE_URL,
) -> PageRequest:
    """Build the request for one chunk.

    The offset always advances by the requested size, on the assumption
    that every page but the last comes back full.

    Examples:
        >>> build_page(500, 1000).url
        'https://top.gg/api/client/entities/search?platform=discord&entityType=server&amount=500&skip=1000'
    """
    params = {
        "amount": chunk_size,
        "skip": skip,
        "tags": tags,
        "query": query,
        "base_url": base_url,
    }
    return PageRequest(url=build_url(SPEC, params), skip_delta=chunk_size)


class Adapter(ResponseAdapter):
    """Adapter extracting the raw ``results`` records from a search page."""

    def parse(self, response: Any, params: dict[str, Any]) -> list[dict[str, Any]]:
        """Validate a search response and return its records unchanged.

        Args:
            response: Decoded JSON body
            params: Request parameters (unused, kept for the adapter interface)

        Returns:
            The ``results`` list, records untouched

        Raises:
            ParseError: If the body is not an object with a valid ``results`` list
        """
        try:
            SearchResponse.model_validate(response)
        except ValidationError as e:
            raise ParseError(f"Unexpected search response shape: {e}") from e
        return list(response["results"])
