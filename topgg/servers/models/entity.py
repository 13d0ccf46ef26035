"""Server entity data models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Entity(BaseModel):
    """Server record as returned by the search endpoint.

    Only the fields the pipeline relies on are declared; everything else
    the API sends is allowed through untouched.
    """

    id: str
    name: str
    member_count: int = Field(..., alias="memberCount", ge=0)

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class SimplifiedEntity(BaseModel):
    """Three-field summary of a server (``_id``, ``name``, ``members``)."""

    id: str = Field(..., alias="_id")
    name: str
    members: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_entity(cls, record: dict[str, Any]) -> SimplifiedEntity:
        """Project a raw search record onto the summary fields."""
        return cls(id=record["id"], name=record["name"], members=record["memberCount"])

    def to_record(self) -> dict[str, Any]:
        """Dump using the public key names."""
        return self.model_dump(by_alias=True)


class SearchResponse(BaseModel):
    """Body of one search page; only ``results`` is consumed."""

    results: list[Entity]
