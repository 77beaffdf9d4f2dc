# tests/stores/test_sqlite_project.py
"""Tests for SQLite project store."""

import os
import sqlite3
import tempfile

import pytest

from scout.models import Category, Project
from scout.stores.base import ProjectStore
from scout.stores.sqlite_project import SQLiteProjectStore


@pytest.fixture
def temp_db():
    """Create a temporary database file."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield os.path.join(tmpdir, "nested", "projects.db")


@pytest.fixture
def project_store(temp_db):
    """Create a SQLiteProjectStore instance."""
    return SQLiteProjectStore(temp_db)


class TestSQLiteProjectStore:
    def test_is_projectstore(self, project_store):
        assert isinstance(project_store, ProjectStore)

    def test_creates_parent_directory(self, temp_db, project_store):
        assert os.path.exists(temp_db)

    def test_put_and_get(self, project_store):
        web = Category(name="Web", color="#ff0000")
        project = Project(
            title="Inventory Manager",
            description="track stock levels",
            status="approved",
            categories=[web],
            github_url="https://github.com/example/inventory",
            author_name="Sam",
        )
        project_store.put(project)

        retrieved = project_store.get(project.id)
        assert retrieved is not None
        assert retrieved.title == "Inventory Manager"
        assert retrieved.slug == "inventory-manager"
        assert retrieved.status == "approved"
        assert retrieved.github_url == "https://github.com/example/inventory"
        assert retrieved.website_url is None
        assert retrieved.author_name == "Sam"
        assert retrieved.created_at == project.created_at
        assert retrieved.categories == [web]

    def test_get_nonexistent(self, project_store):
        assert project_store.get("nonexistent-id") is None

    def test_get_by_slug(self, project_store):
        project = Project(title="Recipe Box", description="Recipes")
        project_store.put(project)

        retrieved = project_store.get_by_slug("recipe-box")
        assert retrieved is not None
        assert retrieved.id == project.id
        assert project_store.get_by_slug("missing") is None

    def test_put_overwrites(self, project_store):
        project = Project(title="Old", slug="thing", description="old")
        project_store.put(project)
        project_store.put(project.model_copy(update={"title": "New", "description": "new"}))

        retrieved = project_store.get(project.id)
        assert retrieved.title == "New"
        assert project_store.count_projects() == 1

    def test_put_replaces_categories(self, project_store):
        a, b = Category(name="A"), Category(name="B")
        project = Project(title="P", description="", categories=[a])
        project_store.put(project)
        project_store.put(project.model_copy(update={"categories": [b]}))

        assert [c.name for c in project_store.get(project.id).categories] == ["B"]

    def test_duplicate_slug_rejected(self, project_store):
        project_store.put(Project(title="Same", description=""))
        with pytest.raises(sqlite3.IntegrityError):
            project_store.put(Project(title="Same", description=""))


class TestListApproved:
    def test_only_approved(self, project_store, sample_projects):
        project_store.put_many(sample_projects)

        approved = project_store.list_approved()
        assert [p.id for p in approved] == ["p-inventory", "p-recipes", "p-chess"]

    def test_includes_category_names(self, project_store, sample_projects):
        project_store.put_many(sample_projects)

        by_id = {p.id: p for p in project_store.list_approved()}
        assert by_id["p-inventory"].category_names == ("Inventory",)
        assert by_id["p-recipes"].category_names == ()

    def test_insertion_order_survives_updates(self, project_store):
        first = Project(id="1", title="First", description="", status="approved")
        second = Project(id="2", title="Second", description="", status="approved")
        project_store.put_many([first, second])

        project_store.put(first.model_copy(update={"description": "edited"}))

        assert [p.id for p in project_store.list_approved()] == ["1", "2"]

    def test_category_order_preserved(self, project_store):
        cats = [Category(name="Zeta"), Category(name="Alpha"), Category(name="Mid")]
        project_store.put(Project(title="P", description="", status="approved", categories=cats))

        assert project_store.list_approved()[0].category_names == ("Zeta", "Alpha", "Mid")

    def test_empty_store(self, project_store):
        assert project_store.list_approved() == []

    def test_reflects_status_changes(self, project_store, sample_projects):
        project_store.put_many(sample_projects)
        project_store.set_status("p-chess", "rejected")
        project_store.set_status("p-pending", "approved")

        ids = [p.id for p in project_store.list_approved()]
        assert "p-chess" not in ids
        assert "p-pending" in ids


class TestModeration:
    def test_list_projects_all(self, project_store, sample_projects):
        project_store.put_many(sample_projects)
        assert len(project_store.list_projects()) == 5

    def test_list_projects_by_status(self, project_store, sample_projects):
        project_store.put_many(sample_projects)

        assert [p.id for p in project_store.list_projects("pending")] == ["p-pending"]
        assert [p.id for p in project_store.list_projects("rejected")] == ["p-rejected"]

    def test_set_status_missing(self, project_store):
        assert project_store.set_status("missing", "approved") is False

    def test_count_projects(self, project_store, sample_projects):
        project_store.put_many(sample_projects)

        assert project_store.count_projects() == 5
        assert project_store.count_projects("approved") == 3

    def test_list_categories_sorted_and_shared(self, project_store, sample_projects):
        project_store.put_many(sample_projects)

        names = [c.name for c in project_store.list_categories()]
        assert names == ["Games", "Inventory"]

    def test_put_many_empty(self, project_store):
        project_store.put_many([])
        assert project_store.count_projects() == 0
