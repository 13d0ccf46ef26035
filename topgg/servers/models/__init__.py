"""Data models for search results and per-call options.

All option models are immutable (frozen=True). Entity models validate the
shape of API records; the pipeline itself passes plain dicts so extra
fields survive verbatim and results serialize straight to JSON.
"""

from .entity import Entity, SearchResponse, SimplifiedEntity
from .options import PostProcessOptions, QueryOptions, coerce_options

__all__ = [
    "Entity",
    "PostProcessOptions",
    "QueryOptions",
    "SearchResponse",
    "SimplifiedEntity",
    "coerce_options",
]
