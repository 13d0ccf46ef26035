"""Chunking layer for offset pagination.

Architecture:
    The chunking layer consists of:
    - definitions.py: Chunk metadata structures (ChunkPolicy, ChunkPlan, FetchedPage, ChunkResult)
    - planners.py: Chunk planning logic (splits a total into page sizes)
    - executors.py: Chunk execution logic (fetches pages in order and concatenates)
    - telemetry.py: Structured logging

Usage:
    Endpoints opt into chunking by carrying a ``chunk_policy`` on their
    endpoint specification; the orchestrator reads it to plan and execute.
"""

from __future__ import annotations

from .definitions import (
    ChunkPlan,
    ChunkPolicy,
    ChunkResult,
    FetchedPage,
    extract_chunk_policy,
)
from .executors import ChunkExecutor
from .planners import ChunkPlanner, plan_chunks

__all__ = [
    "ChunkPolicy",
    "ChunkPlan",
    "ChunkResult",
    "FetchedPage",
    "ChunkPlanner",
    "ChunkExecutor",
    "extract_chunk_policy",
    "plan_chunks",
]
