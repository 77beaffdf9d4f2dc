# src/scout/commands/load.py
"""Load command - import projects from a YAML or JSON file.

The file holds either a list of project entries or a mapping with a
``projects:`` list:

    projects:
      - title: Inventory Manager
        description: Track stock levels across warehouses
        categories: [Inventory, Dashboard]
        status: approved
        github_url: https://github.com/example/inventory

Category names are matched against categories already in the store, and an
entry without an ``id`` updates the stored project with the same slug, so
re-loading a file does not duplicate anything.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from scout.commands.base import LoadResult
from scout.config import ConfigError, get_data_dir, get_store
from scout.models import Category, Project, ProjectStatus, slugify


class ProjectEntry(BaseModel):
    """One project as written in an import file."""

    id: str | None = None
    title: str = Field(min_length=1)
    description: str
    slug: str | None = None
    status: ProjectStatus | None = None
    categories: list[str] = Field(default_factory=list)
    github_url: str | None = None
    website_url: str | None = None
    author_name: str | None = None


def read_entries(path: Path) -> list[Any]:
    """Read raw project entries from a YAML or JSON file.

    Raises:
        ValueError: If the file does not contain a list of projects.
    """
    with open(path, encoding="utf-8") as f:
        if path.suffix.lower() == ".json":
            data = json.load(f)
        else:
            data = yaml.safe_load(f)

    if isinstance(data, dict):
        data = data.get("projects")
    if not isinstance(data, list):
        raise ValueError("Expected a list of projects or a 'projects:' list")
    return data


def _entry_label(raw: Any, index: int) -> str:
    if isinstance(raw, dict) and raw.get("title"):
        return str(raw["title"])
    return f"entry {index + 1}"


def load_projects(
    path: str,
    approve: bool = False,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> LoadResult:
    """Load projects from a file into the store.

    Args:
        path: YAML or JSON file with project entries
        approve: Mark every loaded project approved, overriding file statuses
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        LoadResult with counts and per-entry errors
    """
    file_path = Path(path)
    if not file_path.is_file():
        return LoadResult(success=False, path=path, error=f"File not found: {path}")

    try:
        raw_entries = read_entries(file_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        return LoadResult(success=False, path=path, error=f"Could not read {path}: {e}")

    effective_data_dir = get_data_dir(data_dir, config_path)
    if isinstance(effective_data_dir, ConfigError):
        return LoadResult(success=False, path=path, error=effective_data_dir.message)
    os.makedirs(effective_data_dir, exist_ok=True)

    try:
        store = get_store(effective_data_dir)
        categories = {c.name.lower(): c for c in store.list_categories()}
    except Exception as e:
        return LoadResult(success=False, path=path, error=f"Failed to access database: {e}")

    result = LoadResult(success=True, path=path)
    for index, raw in enumerate(raw_entries):
        label = _entry_label(raw, index)
        try:
            entry = ProjectEntry.model_validate(raw)
        except ValidationError as e:
            result.failed += 1
            result.errors.append((label, f"{e.error_count()} invalid field(s)"))
            continue

        project_categories = []
        for name in entry.categories:
            category = categories.setdefault(name.lower(), Category(name=name))
            project_categories.append(category)

        fields: dict[str, Any] = {
            "title": entry.title,
            "description": entry.description,
            "status": "approved" if approve else (entry.status or "pending"),
            "categories": project_categories,
            "github_url": entry.github_url,
            "website_url": entry.website_url,
            "author_name": entry.author_name,
        }
        slug = entry.slug or slugify(entry.title).strip("-")
        fields["slug"] = slug

        try:
            if entry.id:
                existing = store.get(entry.id)
            else:
                existing = store.get_by_slug(slug) if slug else None
            if existing is not None:
                fields["id"] = existing.id
                fields["created_at"] = existing.created_at
            elif entry.id:
                fields["id"] = entry.id
            store.put(Project(**fields))
        except Exception as e:
            result.failed += 1
            result.errors.append((label, str(e)))
            continue
        result.loaded += 1

    if result.loaded == 0 and result.failed > 0:
        result.success = False
        result.error = "No projects could be loaded"

    return result
