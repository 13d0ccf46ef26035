"""Chunking metadata definitions and policy structures.

This module defines the data structures used to describe how a requested
total is split into pages, what one fetched page looks like, and the
aggregated result of a chunked fetch.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ChunkPolicy:
    """Chunking policy for an endpoint.

    Attributes:
        max_points: Maximum number of records per request (the page cap)
        skip_empty_chunks: Do not request zero-size chunks (only planned for a zero total)
    """

    max_points: int
    skip_empty_chunks: bool = True


@dataclass(frozen=True)
class ChunkPlan:
    """Plan for a single chunk.

    Attributes:
        limit: Number of records requested by this chunk
        chunk_index: Zero-based index of this chunk in the overall plan
    """

    limit: int
    chunk_index: int = 0


@dataclass(frozen=True)
class FetchedPage:
    """One fetched page.

    Attributes:
        data: Records extracted from the response
        skip_delta: How far the skip offset advances after this page
    """

    data: list[Any]
    skip_delta: int


@dataclass
class ChunkResult:
    """Result of chunked execution.

    Attributes:
        data: Aggregated records from all chunks, in request order
        chunks_used: Number of chunks that were fetched
        chunks_skipped: Number of zero-size chunks not requested
        total_points: Total number of records aggregated
        final_skip: Skip offset after the last chunk
    """

    data: list[Any] = field(default_factory=list)
    chunks_used: int = 0
    chunks_skipped: int = 0
    total_points: int = 0
    final_skip: int = 0


def extract_chunk_policy(spec: Any, params: dict[str, Any] | None = None) -> ChunkPolicy | None:
    """Extract chunk policy from endpoint specification.

    If the spec has a `chunk_policy` attribute, it is returned (or called as
    a factory with the request params if it is callable). Otherwise None is
    returned, meaning the endpoint does not support chunking.

    Args:
        spec: REST endpoint specification
        params: Optional request params for dynamic policy creation

    Returns:
        ChunkPolicy if endpoint supports chunking, None otherwise
    """
    if hasattr(spec, "chunk_policy") and spec.chunk_policy is not None:
        policy = spec.chunk_policy
        if callable(policy) and not isinstance(policy, ChunkPolicy):
            return policy(params or {})
        return policy
    return None
