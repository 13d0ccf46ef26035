"""top.gg REST endpoint definitions."""

from .search import SPEC, Adapter, PageRequest, build_page, build_query

__all__ = ["SPEC", "Adapter", "PageRequest", "build_page", "build_query"]
