# src/scout/commands/search.py
"""Search command - find projects that solve a problem.

``search_project_solutions`` is the entry point UIs call. Callers only ever
see a SearchResult; whether the AI recommender or keyword ranking answered is
not exposed.
"""

from __future__ import annotations

import os
from pathlib import Path

from scout.config import ConfigError, create_scout, get_scout_config
from scout.models import SearchResult


def _missing_data_dir(data_dir: str) -> SearchResult:
    return SearchResult(
        success=False,
        error=f"Data directory not found: {data_dir}. Run 'scout load' first.",
    )


def search_project_solutions(
    problem: str,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> SearchResult:
    """Find up to three approved projects that solve a problem.

    Args:
        problem: Free-text problem statement
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        SearchResult; ``data`` is empty for blank problems and no-match searches
    """
    if not problem.strip():
        return SearchResult(success=True, data=[])

    config = get_scout_config(data_dir, config_path)
    if isinstance(config, ConfigError):
        return SearchResult(success=False, error=config.message)

    if not os.path.exists(config.data_dir):
        return _missing_data_dir(config.data_dir)

    return create_scout(config).search(problem)


async def asearch_project_solutions(
    problem: str,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> SearchResult:
    """Async variant of search_project_solutions."""
    if not problem.strip():
        return SearchResult(success=True, data=[])

    config = get_scout_config(data_dir, config_path)
    if isinstance(config, ConfigError):
        return SearchResult(success=False, error=config.message)

    if not os.path.exists(config.data_dir):
        return _missing_data_dir(config.data_dir)

    return await create_scout(config).asearch(problem)
