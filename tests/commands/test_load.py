# tests/commands/test_load.py
"""Tests for the load command."""

import json
import os

import pytest

from scout.commands import load
from scout.config import get_store

PROJECTS_YAML = """
projects:
  - title: Inventory Manager
    description: Track stock levels across warehouses
    categories: [Inventory, Dashboard]
    github_url: https://github.com/example/inventory
  - title: Recipe Box
    description: Save and share family recipes
    status: approved
    categories: [food]
"""


@pytest.fixture
def projects_file(isolated_cwd):
    path = os.path.join(isolated_cwd, "projects.yaml")
    with open(path, "w", encoding="utf-8") as f:
        f.write(PROJECTS_YAML)
    return path


@pytest.fixture
def target_dir(isolated_cwd):
    return os.path.join(isolated_cwd, "data")


class TestLoadCommand:
    """Tests for load.load_projects()."""

    def test_load_yaml(self, projects_file, target_dir) -> None:
        """Entries default to pending unless they set a status."""
        result = load.load_projects(projects_file, data_dir=target_dir)

        assert result.success is True
        assert result.loaded == 2
        assert result.failed == 0

        store = get_store(target_dir)
        inventory = store.get_by_slug("inventory-manager")
        assert inventory.status == "pending"
        assert [c.name for c in inventory.categories] == ["Inventory", "Dashboard"]
        assert inventory.github_url == "https://github.com/example/inventory"
        assert store.get_by_slug("recipe-box").status == "approved"

    def test_approve_flag(self, projects_file, target_dir) -> None:
        """--approve marks every loaded project approved."""
        load.load_projects(projects_file, approve=True, data_dir=target_dir)

        assert get_store(target_dir).count_projects("approved") == 2

    def test_reload_is_idempotent(self, projects_file, target_dir) -> None:
        """Loading the same file twice updates instead of duplicating."""
        load.load_projects(projects_file, data_dir=target_dir)
        store = get_store(target_dir)
        first_id = store.get_by_slug("inventory-manager").id

        result = load.load_projects(projects_file, approve=True, data_dir=target_dir)

        assert result.loaded == 2
        assert store.count_projects() == 2
        assert store.get_by_slug("inventory-manager").id == first_id
        assert store.get_by_slug("inventory-manager").status == "approved"
        assert len(store.list_categories()) == 3

    def test_categories_matched_case_insensitively(self, isolated_cwd, target_dir) -> None:
        """Category names reuse existing categories regardless of case."""
        path = os.path.join(isolated_cwd, "p.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump(
                [
                    {"title": "A", "description": "", "categories": ["Web"]},
                    {"title": "B", "description": "", "categories": ["web"]},
                ],
                f,
            )

        load.load_projects(path, data_dir=target_dir)

        assert [c.name for c in get_store(target_dir).list_categories()] == ["Web"]

    def test_invalid_entries_skipped(self, isolated_cwd, target_dir) -> None:
        """Invalid entries are reported and the rest still load."""
        path = os.path.join(isolated_cwd, "p.yaml")
        with open(path, "w", encoding="utf-8") as f:
            f.write(
                "- title: Good\n  description: fine\n"
                "- title: Missing description\n"
                "- title: Bad status\n  description: x\n  status: archived\n"
            )

        result = load.load_projects(path, data_dir=target_dir)

        assert result.success is True
        assert result.loaded == 1
        assert result.failed == 2
        assert [label for label, _ in result.errors] == ["Missing description", "Bad status"]

    def test_all_entries_invalid(self, isolated_cwd, target_dir) -> None:
        path = os.path.join(isolated_cwd, "p.yaml")
        with open(path, "w", encoding="utf-8") as f:
            f.write("- description: no title\n")

        result = load.load_projects(path, data_dir=target_dir)

        assert result.success is False
        assert result.errors[0][0] == "entry 1"

    def test_file_not_found(self, isolated_cwd) -> None:
        result = load.load_projects("missing.yaml")

        assert result.success is False
        assert "File not found" in result.error

    def test_not_a_list(self, isolated_cwd, target_dir) -> None:
        path = os.path.join(isolated_cwd, "p.yaml")
        with open(path, "w", encoding="utf-8") as f:
            f.write("title: just one mapping\n")

        result = load.load_projects(path, data_dir=target_dir)

        assert result.success is False
        assert "Could not read" in result.error
