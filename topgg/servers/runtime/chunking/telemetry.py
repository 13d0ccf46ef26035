"""Structured logging for chunking operations.

Each helper emits one record whose message is a stable event name and
whose fields travel in ``extra`` so JSON log formatters can pick them up.
"""

from __future__ import annotations

import logging

from .definitions import ChunkResult

logger = logging.getLogger(__name__)


def log_chunk_plan(
    *,
    endpoint_id: str,
    total_chunks: int,
    total_limit: int,
    page_cap: int,
) -> None:
    """Log chunk plan creation.

    Args:
        endpoint_id: Endpoint identifier
        total_chunks: Total number of chunks planned
        total_limit: Total number of records requested
        page_cap: Maximum records per chunk
    """
    logger.info(
        "chunk_plan_created",
        extra={
            "endpoint_id": endpoint_id,
            "total_chunks": total_chunks,
            "total_limit": total_limit,
            "page_cap": page_cap,
        },
    )


def log_chunk_completed(
    *,
    endpoint_id: str,
    chunk_index: int,
    skip: int,
    rows_aggregated: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single chunk.

    Args:
        endpoint_id: Endpoint identifier
        chunk_index: Zero-based index of the chunk
        skip: Skip offset the chunk was requested at
        rows_aggregated: Number of records aggregated from this chunk
        latency_ms: Latency in milliseconds (optional)
    """
    logger.info(
        "chunk_completed",
        extra={
            "endpoint_id": endpoint_id,
            "chunk_index": chunk_index,
            "skip": skip,
            "rows_aggregated": rows_aggregated,
            "latency_ms": latency_ms,
        },
    )


def log_chunk_skipped(*, endpoint_id: str, chunk_index: int, skip: int) -> None:
    """Log a zero-size chunk that was not requested."""
    logger.debug(
        "chunk_skipped",
        extra={"endpoint_id": endpoint_id, "chunk_index": chunk_index, "skip": skip},
    )


def log_chunk_execution_complete(
    *,
    endpoint_id: str,
    result: ChunkResult,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of chunk execution.

    Args:
        endpoint_id: Endpoint identifier
        result: ChunkResult from execution
        total_latency_ms: Total latency in milliseconds (optional)
    """
    logger.info(
        "chunk_execution_complete",
        extra={
            "endpoint_id": endpoint_id,
            "chunks_used": result.chunks_used,
            "chunks_skipped": result.chunks_skipped,
            "total_points": result.total_points,
            "final_skip": result.final_skip,
            "total_latency_ms": total_latency_ms,
        },
    )


def log_chunk_error(
    *,
    endpoint_id: str,
    chunk_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log chunk execution error.

    Args:
        endpoint_id: Endpoint identifier
        chunk_index: Zero-based index of the chunk that failed
        error_type: Type of error (e.g., "NetworkError", "ParseError")
        error_message: Error message
    """
    logger.error(
        "chunk_error",
        extra={
            "endpoint_id": endpoint_id,
            "chunk_index": chunk_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
