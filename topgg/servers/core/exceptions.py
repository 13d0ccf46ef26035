"""Custom exception hierarchy."""

from __future__ import annotations


class ScraperError(Exception):
    """Base exception for all library errors."""

    pass


class InvalidArgumentError(ScraperError, ValueError):
    """Caller supplied an invalid amount or option."""

    pass


class NetworkError(ScraperError):
    """Transport-level failure while requesting a page."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class ParseError(ScraperError):
    """Response body is not valid JSON or lacks the expected shape."""

    pass
