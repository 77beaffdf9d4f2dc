"""UI-agnostic command layer for Project Scout.

Commands return data structures, allowing the CLI and TUI to render results
appropriately.

Usage:
    from scout.commands import search, load, list_cmd

    result = search.search_project_solutions("I need to track inventory")
    result = load.load_projects("projects.yaml", approve=True)
    result = list_cmd.list_projects(status="pending")
"""

from scout.commands import config_cmd, load, review, search
from scout.commands import list as list_cmd
from scout.commands.base import (
    CommandResult,
    ConfigResult,
    ListResult,
    LoadResult,
    ProjectInfo,
    ReviewResult,
    SettingInfo,
)

__all__ = [
    # Base types
    "CommandResult",
    # Result types
    "ConfigResult",
    "ListResult",
    "LoadResult",
    "ProjectInfo",
    "ReviewResult",
    "SettingInfo",
    # Command modules
    "config_cmd",
    "list_cmd",
    "load",
    "review",
    "search",
]
