"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..chunking import ChunkPolicy
from .http_client import HTTPClient


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    build_path: Callable[[dict[str, Any]], str]
    # Ordered (name, value) pairs; values are inserted without escaping
    build_query: Callable[[dict[str, Any]], list[tuple[str, Any]]] | None = None
    # Chunk policy can be static or a factory function that creates policy from params
    chunk_policy: ChunkPolicy | Callable[[dict[str, Any]], ChunkPolicy] | None = None


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


def build_url(spec: RestEndpointSpec, params: dict[str, Any]) -> str:
    """Join the endpoint path and its query pairs into one URL."""
    path = spec.build_path(params)
    query = spec.build_query(params) if spec.build_query else []
    if not query:
        return path
    return path + "?" + "&".join(f"{name}={value}" for name, value in query)


class RestRunner:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def run(self, *, url: str, adapter: ResponseAdapter, params: dict[str, Any]) -> Any:
        data = await self._http.get(url)
        return adapter.parse(data, params)
