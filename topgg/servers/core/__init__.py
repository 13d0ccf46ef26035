"""Core components."""

from .exceptions import InvalidArgumentError, NetworkError, ParseError, ScraperError

__all__ = [
    "ScraperError",
    "InvalidArgumentError",
    "NetworkError",
    "ParseError",
]
