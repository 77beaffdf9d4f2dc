"""Tests for the Project, Category and ProjectSummary models."""

import pytest
from pydantic import ValidationError

from scout.models import Category, Project, ProjectSummary, slugify


class TestSlugify:
    def test_collapses_non_alphanumerics(self):
        assert slugify("Inventory Manager 2.0!") == "inventory-manager-2-0-"

    def test_category_slug(self):
        assert Category(name="Machine Learning").slug == "machine-learning"


class TestProject:
    def test_defaults(self):
        project = Project(title="Inventory Manager", description="track stock levels")
        assert project.slug == "inventory-manager"
        assert project.status == "pending"
        assert project.categories == []
        assert project.id is not None

    def test_explicit_slug_kept(self):
        project = Project(title="Inventory Manager", slug="stock", description="")
        assert project.slug == "stock"

    def test_non_ascii_title_falls_back_to_id(self):
        project = Project(id="p-cjk", title="在庫管理", description="")
        assert project.slug == "p-cjk"

    def test_non_ascii_titles_get_distinct_slugs(self):
        first = Project(title="在庫管理", description="")
        second = Project(title="家計簿", description="")
        assert first.slug != second.slug

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            Project(title="X", description="", status="archived")

    def test_to_summary(self):
        project = Project(
            id="p-1",
            title="Inventory Manager",
            description="track stock levels",
            categories=[Category(name="Inventory")],
        )
        summary = project.to_summary()

        assert summary.id == "p-1"
        assert summary.slug == "inventory-manager"
        assert summary.category_names == ("Inventory",)


class TestProjectSummary:
    def test_is_read_only(self):
        summary = ProjectSummary(id="p-1", title="A", slug="a", description="")
        with pytest.raises(ValidationError):
            summary.title = "B"

    def test_category_names_immutable(self):
        summary = ProjectSummary(
            id="p-1", title="A", slug="a", description="", category_names=["Games"]
        )
        assert summary.category_names == ("Games",)
        with pytest.raises(AttributeError):
            summary.category_names.append("Dashboard")
