"""Chunk execution logic for fetching and aggregating pages.

This module provides the ChunkExecutor class that walks a chunk plan in
order, threads the skip offset through each fetch, and concatenates the
returned records.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from time import perf_counter
from typing import Any

from .definitions import ChunkPlan, ChunkPolicy, ChunkResult, FetchedPage
from .telemetry import (
    log_chunk_completed,
    log_chunk_error,
    log_chunk_execution_complete,
    log_chunk_skipped,
)

FetchChunk = Callable[[ChunkPlan, int], Awaitable[FetchedPage]]


class ChunkExecutor:
    """Executes chunk plans and aggregates results.

    Chunks are fetched strictly one after another. The skip offset starts
    at zero and advances by each page's declared ``skip_delta``, not by the
    number of records that actually came back. The first failing fetch is
    logged and re-raised; records gathered so far are discarded.
    """

    def __init__(self, policy: ChunkPolicy, endpoint_id: str = "unknown") -> None:
        """Initialize chunk executor.

        Args:
            policy: Chunking policy for the endpoint
            endpoint_id: Identifier used in log records
        """
        self._policy = policy
        self._endpoint_id = endpoint_id

    async def execute(
        self,
        *,
        plans: list[ChunkPlan],
        fetch_chunk: FetchChunk,
    ) -> ChunkResult:
        """Execute chunk plans and aggregate results.

        Args:
            plans: List of chunk plans to execute
            fetch_chunk: Async function taking a ChunkPlan and the current skip
                offset, returning the fetched page

        Returns:
            ChunkResult with aggregated data and metadata

        Raises:
            ValueError: If no plans are provided
        """
        if not plans:
            raise ValueError("Cannot execute: no chunk plans provided")

        started = perf_counter()
        aggregated: list[Any] = []
        chunks_used = 0
        chunks_skipped = 0
        skip = 0

        for plan in plans:
            if plan.limit == 0 and self._policy.skip_empty_chunks:
                chunks_skipped += 1
                log_chunk_skipped(
                    endpoint_id=self._endpoint_id, chunk_index=plan.chunk_index, skip=skip
                )
                continue

            chunk_start = perf_counter()
            try:
                page = await fetch_chunk(plan, skip)
            except Exception as e:
                log_chunk_error(
                    endpoint_id=self._endpoint_id,
                    chunk_index=plan.chunk_index,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise
            chunks_used += 1

            log_chunk_completed(
                endpoint_id=self._endpoint_id,
                chunk_index=plan.chunk_index,
                skip=skip,
                rows_aggregated=len(page.data),
                latency_ms=(perf_counter() - chunk_start) * 1000.0,
            )

            aggregated.extend(page.data)
            skip += page.skip_delta

        result = ChunkResult(
            data=aggregated,
            chunks_used=chunks_used,
            chunks_skipped=chunks_skipped,
            total_points=len(aggregated),
            final_skip=skip,
        )

        log_chunk_execution_complete(
            endpoint_id=self._endpoint_id,
            result=result,
            total_latency_ms=(perf_counter() - started) * 1000.0,
        )

        return result
