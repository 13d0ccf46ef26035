"""Unit tests for server entity models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from topgg.servers.models import Entity, SearchResponse, SimplifiedEntity


class TestEntity:
    """Test Entity validation."""

    def test_extra_fields_allowed(self):
        """Test unknown API fields are kept on the model."""
        entity = Entity.model_validate(
            {"id": "1", "name": "A", "memberCount": 10, "tags": ["gaming"]}
        )
        assert entity.member_count == 10
        assert entity.model_extra == {"tags": ["gaming"]}

    def test_negative_member_count_rejected(self):
        """Test memberCount must be non-negative."""
        with pytest.raises(ValidationError):
            Entity.model_validate({"id": "1", "name": "A", "memberCount": -1})

    def test_missing_member_count_rejected(self):
        """Test memberCount is required."""
        with pytest.raises(ValidationError):
            Entity.model_validate({"id": "1", "name": "A"})


class TestSimplifiedEntity:
    """Test SimplifiedEntity projection."""

    def test_from_entity_keys(self):
        """Test projection yields exactly _id, name and members."""
        record = {"id": "42", "name": "Guild", "memberCount": 7, "iconUrl": "x"}
        simplified = SimplifiedEntity.from_entity(record).to_record()
        assert simplified == {"_id": "42", "name": "Guild", "members": 7}
        assert list(simplified) == ["_id", "name", "members"]


class TestSearchResponse:
    """Test SearchResponse validation."""

    def test_results_required(self):
        """Test a body without results is rejected."""
        with pytest.raises(ValidationError):
            SearchResponse.model_validate({"total": 0})

    def test_other_fields_ignored(self):
        """Test top-level fields besides results are ignored."""
        resp = SearchResponse.model_validate({"results": [], "total": 12})
        assert resp.results == []
