"""Scraper facade tying planning, fetching and post-processing together.

Architecture:
    TopGGScraper runs one pipeline per call:
    - ChunkPlanner splits the requested amount into page sizes
    - ChunkExecutor walks the plan, building each page URL from the
      running skip offset and fetching it through RestRunner
    - processing.process applies the requested transforms

Design Decisions:
    - Each call is independent; nothing is cached between calls
    - Pages are fetched one at a time and the first failure aborts the call
    - HTTP client injection allows testing with a mocked session
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..connectors.topgg.config import BASE_URL, PAGE_CAP
from ..connectors.topgg.rest.endpoints.search import SPEC, Adapter, build_page
from ..models import PostProcessOptions, QueryOptions, coerce_options
from ..processing import process
from ..runtime.chunking import (
    ChunkExecutor,
    ChunkPlan,
    ChunkPlanner,
    FetchedPage,
    extract_chunk_policy,
)
from ..runtime.rest import HTTPClient, RestRunner

logger = logging.getLogger(__name__)


class TopGGScraper:
    """Fetches Discord server listings from top.gg search.

    Example:
        >>> async with TopGGScraper() as scraper:
        ...     servers = await scraper.get_servers(
        ...         1500,
        ...         {"tags": "gaming"},
        ...         {"simplify": True, "sort": True, "filter": True, "filterSize": 100},
        ...     )
    """

    def __init__(
        self,
        *,
        base_url: str = BASE_URL,
        page_cap: int = PAGE_CAP,
        timeout: float | None = None,
        skip_empty_chunks: bool = True,
        http: HTTPClient | None = None,
    ) -> None:
        """Initialize the scraper.

        Args:
            base_url: Scheme and host of the search API
            page_cap: Maximum servers requested per page
            timeout: Total timeout per request in seconds (None = no timeout)
            skip_empty_chunks: Answer an amount of 0 without sending an amount=0 request
            http: Optional HTTPClient (creates and owns one if not provided)
        """
        self._base_url = base_url
        self._chunk_params = {"page_cap": page_cap, "skip_empty_chunks": skip_empty_chunks}
        self._owns_http = http is None
        self._http = http or HTTPClient(timeout=timeout)
        self._runner = RestRunner(self._http)
        self._adapter = Adapter()
        self._closed = False

    async def fetch_entities(
        self,
        amount: int,
        options: QueryOptions | Mapping[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Fetch ``amount`` raw server records, concatenated in page order.

        Args:
            amount: Number of servers to request
            options: QueryOptions or mapping with ``tags`` / ``query``

        Returns:
            Raw records as returned by the API

        Raises:
            InvalidArgumentError: If amount or options are invalid
            NetworkError: If any page request fails
            ParseError: If any page body is malformed
        """
        query_opts = coerce_options(options, QueryOptions)
        policy = extract_chunk_policy(SPEC, self._chunk_params)
        plans = ChunkPlanner(policy, endpoint_id=SPEC.id).plan(limit=amount)

        async def fetch_chunk(plan: ChunkPlan, skip: int) -> FetchedPage:
            page = build_page(
                plan.limit,
                skip,
                tags=query_opts.tags,
                query=query_opts.query,
                base_url=self._base_url,
            )
            records = await self._runner.run(
                url=page.url,
                adapter=self._adapter,
                params={"amount": plan.limit, "skip": skip},
            )
            return FetchedPage(data=records, skip_delta=page.skip_delta)

        executor = ChunkExecutor(policy, endpoint_id=SPEC.id)
        result = await executor.execute(plans=plans, fetch_chunk=fetch_chunk)
        return result.data

    async def get_servers(
        self,
        amount: int,
        options: QueryOptions | Mapping[str, Any] | None = None,
        extras: PostProcessOptions | Mapping[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Fetch servers and apply the requested post-processing.

        Args:
            amount: Number of servers to request
            options: Search filters (``tags``, ``query``)
            extras: Post-processing flags (``simplify``, ``sort``, ``filter``,
                ``filterSize``, ``write``, ``file``)

        Returns:
            Final list of raw or simplified records
        """
        post_opts = coerce_options(extras, PostProcessOptions)
        entities = await self.fetch_entities(amount, options)
        return process(entities, post_opts)

    # --- Lifecycle -----------------------------------------------------------

    async def close(self) -> None:
        """Close the scraper and its HTTP session if it owns one."""
        if self._closed:
            return
        self._closed = True
        logger.debug("Closing TopGGScraper")
        if self._owns_http:
            await self._http.close()

    async def __aenter__(self) -> TopGGScraper:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()


async def get_servers(
    amount: int,
    options: QueryOptions | Mapping[str, Any] | None = None,
    extras: PostProcessOptions | Mapping[str, Any] | None = None,
    **scraper_kwargs: Any,
) -> list[dict[str, Any]]:
    """One-shot entry point: run a scraper for a single call and close it.

    ``scraper_kwargs`` are passed to TopGGScraper (``base_url``,
    ``page_cap``, ``timeout``, ``skip_empty_chunks``, ``http``).
    """
    async with TopGGScraper(**scraper_kwargs) as scraper:
        return await scraper.get_servers(amount, options, extras)
