"""Post-processing of concatenated search results.

Stages run in a fixed order, each only when its option is set:
projection, descending sort, threshold filter, then persistence. Every
stage returns a new list; the caller's list is never mutated.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from operator import itemgetter
from pathlib import Path
from typing import Any

from ..models import PostProcessOptions, SimplifiedEntity, coerce_options

logger = logging.getLogger(__name__)


# Member count field before and after projection
RAW_MEMBERS_KEY = "memberCount"
SIMPLIFIED_MEMBERS_KEY = "members"


def simplify(records: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Project records onto ``_id``, ``name`` and ``members``."""
    return [SimplifiedEntity.from_entity(record).to_record() for record in records]


def sort_by_members(
    records: Iterable[Mapping[str, Any]], key: str = RAW_MEMBERS_KEY
) -> list[Any]:
    """Sort descending by the ``key`` field; ties keep their input order."""
    return sorted(records, key=itemgetter(key), reverse=True)


def filter_by_members(
    records: Iterable[Mapping[str, Any]], threshold: int, key: str = RAW_MEMBERS_KEY
) -> list[Any]:
    """Keep records whose ``key`` field is strictly greater than ``threshold``."""
    return [record for record in records if record[key] > threshold]


def write_results(path: str | Path, records: list[Any]) -> bool:
    """Write records as 2-space indented UTF-8 JSON, replacing the file.

    Failures are logged and reported through the return value only.

    Returns:
        True if the file was written
    """
    path = Path(path)
    try:
        path.write_text(json.dumps(records, indent=2, ensure_ascii=False), encoding="utf-8")
    except OSError as e:
        logger.warning(
            "results_write_failed",
            extra={
                "path": str(path),
                "error_type": type(e).__name__,
                "error_message": str(e),
            },
        )
        return False
    logger.info("results_written", extra={"path": str(path), "records": len(records)})
    return True


def process(
    entities: Iterable[Mapping[str, Any]],
    options: PostProcessOptions | Mapping[str, Any] | None = None,
) -> list[Any]:
    """Apply the enabled transforms to ``entities``.

    Args:
        entities: Raw search records
        options: PostProcessOptions or an equivalent mapping

    Returns:
        The transformed list, whether or not persistence succeeded
    """
    opts = coerce_options(options, PostProcessOptions)

    result: list[Any] = list(entities)
    key = RAW_MEMBERS_KEY
    if opts.simplify:
        result = simplify(result)
        key = SIMPLIFIED_MEMBERS_KEY
    if opts.sort:
        result = sort_by_members(result, key)
    if opts.should_filter:
        result = filter_by_members(result, opts.filter_size, key)
    if opts.should_write:
        write_results(opts.file, result)
    return result
