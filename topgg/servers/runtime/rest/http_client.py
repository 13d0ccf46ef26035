"""HTTP client helper."""

from __future__ import annotations

import asyncio
from typing import Any

import aiohttp

from ...core.exceptions import NetworkError, ParseError


class HTTPClient:
    """Async HTTP client wrapper.

    URLs are handed to aiohttp as strings, which quotes characters that
    cannot appear in a request line (spaces, non-ASCII) and leaves
    existing ``%xx`` escapes alone. Transport failures and non-2xx
    statuses surface as NetworkError, undecodable bodies as ParseError.
    """

    def __init__(self, timeout: float | None = None) -> None:
        # total=None leaves requests unbounded
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def get(self, url: str) -> Any:
        """GET ``url`` and return the decoded JSON body."""
        try:
            async with self.session.get(url) as response:
                response.raise_for_status()
                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    raise ParseError(f"GET {url} returned a body that is not JSON: {e}") from e
        except aiohttp.ClientResponseError as e:
            raise NetworkError(
                f"GET {url} failed with status {e.status}", status_code=e.status, url=url
            ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkError(f"GET {url} failed: {e!r}", url=url) from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
