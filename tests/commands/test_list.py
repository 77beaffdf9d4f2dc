# tests/commands/test_list.py
"""Tests for the list command."""

import os

from scout.commands import list_cmd


class TestListCommand:
    """Tests for list_cmd.list_projects()."""

    def test_list_no_database(self, isolated_cwd) -> None:
        """List with no database returns success with no projects."""
        result = list_cmd.list_projects(data_dir=os.path.join(isolated_cwd, "nonexistent"))

        assert result.success is True
        assert result.projects == []

    def test_list_all(self, isolated_cwd, data_dir) -> None:
        """List returns every project in store order."""
        result = list_cmd.list_projects(data_dir=data_dir)

        assert result.success is True
        assert result.status is None
        assert [p.id for p in result.projects] == [
            "p-inventory",
            "p-recipes",
            "p-chess",
            "p-pending",
            "p-rejected",
        ]

    def test_list_by_status(self, isolated_cwd, data_dir) -> None:
        """List filters by status."""
        result = list_cmd.list_projects(status="pending", data_dir=data_dir)

        assert result.status == "pending"
        assert len(result.projects) == 1
        project = result.projects[0]
        assert project.title == "Inventory Scanner"
        assert project.slug == "inventory-scanner"
        assert project.categories == ["Inventory"]
