# src/scout/commands/review.py
"""Review command - approve or reject submitted projects.

Only approved projects take part in solution searches.
"""

from __future__ import annotations

import os
from pathlib import Path

from scout.commands.base import ReviewResult
from scout.commands.list import project_info
from scout.config import ConfigError, get_data_dir, get_store
from scout.models import ProjectStatus


def review(
    project_ref: str,
    status: ProjectStatus,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> ReviewResult:
    """Set the status of a project.

    Args:
        project_ref: Project ID or slug
        status: New status
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        ReviewResult with the updated project
    """
    effective_data_dir = get_data_dir(data_dir, config_path)
    if isinstance(effective_data_dir, ConfigError):
        return ReviewResult(success=False, error=effective_data_dir.message)

    if not os.path.exists(effective_data_dir):
        return ReviewResult(success=False, error="No database found.")

    try:
        store = get_store(effective_data_dir)
        project = store.get(project_ref) or store.get_by_slug(project_ref)
        if project is None:
            return ReviewResult(success=False, error=f"Project not found: {project_ref}")

        previous_status = project.status
        store.set_status(project.id, status)
    except Exception as e:
        return ReviewResult(success=False, error=f"Failed to update project: {e}")

    return ReviewResult(
        success=True,
        project=project_info(project.model_copy(update={"status": status})),
        previous_status=previous_status,
    )
