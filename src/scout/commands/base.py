# src/scout/commands/base.py
"""Result types for the commands layer.

Commands return these dataclasses so the CLI and TUI can each render them
their own way. Search returns the ``scout.models.SearchResult`` model directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CommandResult:
    """Base result type for commands."""

    success: bool
    error: str | None = None


@dataclass
class ProjectInfo:
    """Summary of a stored project for listings."""

    id: str
    title: str
    slug: str
    status: str
    categories: list[str] = field(default_factory=list)


@dataclass
class ListResult(CommandResult):
    """Result of the list command.

    Attributes:
        projects: Matching projects in store order
        status: Status filter that was applied (None for all)
    """

    projects: list[ProjectInfo] = field(default_factory=list)
    status: str | None = None


@dataclass
class LoadResult(CommandResult):
    """Result of the load command.

    Attributes:
        path: File that was loaded
        loaded: Number of projects stored
        failed: Number of entries rejected
        errors: List of (entry label, error message) for rejected entries
    """

    path: str = ""
    loaded: int = 0
    failed: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)


@dataclass
class ReviewResult(CommandResult):
    """Result of the review command.

    Attributes:
        project: The reviewed project, after the status change
        previous_status: Status before the change
    """

    project: ProjectInfo | None = None
    previous_status: str | None = None


@dataclass
class SettingInfo:
    """Information about a single setting."""

    name: str
    value: str
    source: str  # "env var", "yaml", "default"


@dataclass
class ConfigResult(CommandResult):
    """Result of the config command.

    Attributes:
        data_dir: Data directory path
        llm_model: LLM model used by the recommender
        ai_enabled: Whether searches will try the recommender first
        api_key_source: Environment variable holding the credential, if any
        settings: Behavioral settings with sources
        config_path: Path to config file (if found)
        warnings: Problems found in the config file
    """

    data_dir: str = ""
    llm_model: str = ""
    ai_enabled: bool = False
    api_key_source: str | None = None
    settings: list[SettingInfo] = field(default_factory=list)
    config_path: str | None = None
    warnings: list[str] = field(default_factory=list)
