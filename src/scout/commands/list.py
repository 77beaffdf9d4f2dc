# src/scout/commands/list.py
"""List command - list stored projects."""

from __future__ import annotations

import os
from pathlib import Path

from scout.commands.base import ListResult, ProjectInfo
from scout.config import ConfigError, get_data_dir, get_store
from scout.models import Project, ProjectStatus


def project_info(project: Project) -> ProjectInfo:
    return ProjectInfo(
        id=project.id,
        title=project.title,
        slug=project.slug,
        status=project.status,
        categories=[c.name for c in project.categories],
    )


def list_projects(
    status: ProjectStatus | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> ListResult:
    """List stored projects.

    Args:
        status: Only list projects with this status
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        ListResult with project information
    """
    effective_data_dir = get_data_dir(data_dir, config_path)
    if isinstance(effective_data_dir, ConfigError):
        return ListResult(success=False, status=status, error=effective_data_dir.message)

    if not os.path.exists(effective_data_dir):
        return ListResult(success=True, status=status)

    try:
        store = get_store(effective_data_dir)
        projects = store.list_projects(status)
    except Exception as e:
        return ListResult(success=False, status=status, error=f"Failed to access database: {e}")

    return ListResult(
        success=True,
        status=status,
        projects=[project_info(p) for p in projects],
    )
