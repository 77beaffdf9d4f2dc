"""Tests for search result models."""

import pytest
from pydantic import ValidationError

from scout.models import ScoredProject, SearchResult


class TestScoredProject:
    def test_is_read_only(self):
        project = ScoredProject(id="p-1", title="A", slug="a", description="", score=10)
        with pytest.raises(ValidationError):
            project.score = 100


class TestSearchResult:
    def test_data_defaults_to_empty_list(self):
        result = SearchResult(success=False, error="Failed to fetch projects")
        assert result.data == []
        assert result.error == "Failed to fetch projects"
