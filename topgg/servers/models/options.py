"""Per-call option models.

Both models accept the camelCase names used by the search API's own
clients (``filterSize``) as well as snake_case, and reject unknown keys
so a misspelled flag fails loudly instead of being ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..core.exceptions import InvalidArgumentError

_M = TypeVar("_M", bound=BaseModel)


class QueryOptions(BaseModel):
    """Search filters sent to the API."""

    tags: str | None = None
    query: str | None = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("tags", "query", mode="before")
    @classmethod
    def empty_to_none(cls, v: Any) -> Any:
        """Treat empty strings as absent so no empty ``q=&`` is sent."""
        if v == "":
            return None
        return v


class PostProcessOptions(BaseModel):
    """Transforms applied to the concatenated results, in field order."""

    simplify: bool = False
    sort: bool = False
    filter: bool = False
    filter_size: int = Field(default=0, alias="filterSize")
    write: bool = False
    file: Path | None = None

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    @property
    def should_filter(self) -> bool:
        return self.filter and self.filter_size > 0

    @property
    def should_write(self) -> bool:
        return self.write and self.file is not None


def coerce_options(value: _M | Mapping[str, Any] | None, model: type[_M]) -> _M:
    """Validate a mapping (or pass through a model instance) at the API boundary.

    Args:
        value: Model instance, plain mapping, or None for all defaults
        model: Option model class to validate against

    Returns:
        Instance of ``model``

    Raises:
        InvalidArgumentError: If the mapping contains unknown keys or bad values
    """
    if value is None:
        return model()
    if isinstance(value, model):
        return value
    if not isinstance(value, Mapping):
        raise InvalidArgumentError(
            f"{model.__name__} expects a mapping, got {type(value).__name__}"
        )
    try:
        return model.model_validate(dict(value))
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid {model.__name__}: {e}") from e
