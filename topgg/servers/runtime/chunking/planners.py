"""Chunk planning logic for splitting a requested total into pages.

This module provides the ChunkPlanner class that determines how to split
a requested record count into page-sized chunks based on the endpoint's
page cap.
"""

from __future__ import annotations

from ...core.exceptions import InvalidArgumentError
from .definitions import ChunkPlan, ChunkPolicy
from .telemetry import log_chunk_plan


class ChunkPlanner:
    """Plans page sizes for paginated requests.

    Full pages are emitted while the remainder exceeds the page cap, then
    the remainder itself is emitted, so an exact multiple of the cap ends
    on a full page. Only a total of zero plans a zero-size chunk; the
    executor decides whether it is requested
    (``ChunkPolicy.skip_empty_chunks``).
    """

    def __init__(self, policy: ChunkPolicy, endpoint_id: str = "unknown") -> None:
        """Initialize chunk planner.

        Args:
            policy: Chunking policy for the endpoint
            endpoint_id: Identifier used in log records

        Raises:
            InvalidArgumentError: If the policy's page cap is not positive
        """
        if policy.max_points <= 0:
            raise InvalidArgumentError(f"page cap must be positive, got {policy.max_points}")
        self._policy = policy
        self._endpoint_id = endpoint_id

    def plan(self, *, limit: int) -> list[ChunkPlan]:
        """Plan chunks for a request.

        Args:
            limit: Total number of records requested

        Returns:
            List of chunk plans whose limits sum to ``limit``

        Raises:
            InvalidArgumentError: If limit is negative or not an integer
        """
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise InvalidArgumentError(f"amount must be an integer, got {limit!r}")
        if limit < 0:
            raise InvalidArgumentError(f"amount must be non-negative, got {limit}")

        cap = self._policy.max_points
        sizes: list[int] = []
        remaining = limit
        while remaining > cap:
            sizes.append(cap)
            remaining -= cap
        sizes.append(remaining)

        plans = [ChunkPlan(limit=size, chunk_index=i) for i, size in enumerate(sizes)]

        log_chunk_plan(
            endpoint_id=self._endpoint_id,
            total_chunks=len(plans),
            total_limit=limit,
            page_cap=cap,
        )

        return plans


def plan_chunks(total: int, page_cap: int = 1000) -> list[int]:
    """Return just the page sizes for ``total`` records.

    Examples:
        >>> plan_chunks(2500)
        [1000, 1000, 500]
        >>> plan_chunks(2000)
        [1000, 1000]
        >>> plan_chunks(0)
        [0]
    """
    planner = ChunkPlanner(ChunkPolicy(max_points=page_cap))
    return [plan.limit for plan in planner.plan(limit=total)]
