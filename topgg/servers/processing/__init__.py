"""Result post-processing (projection, sort, filter, persistence)."""

from .post_process import (
    RAW_MEMBERS_KEY,
    SIMPLIFIED_MEMBERS_KEY,
    filter_by_members,
    process,
    simplify,
    sort_by_members,
    write_results,
)

__all__ = [
    "RAW_MEMBERS_KEY",
    "SIMPLIFIED_MEMBERS_KEY",
    "filter_by_members",
    "process",
    "simplify",
    "sort_by_members",
    "write_results",
]
