"""Shared pytest fixtures."""

import os
import tempfile

import pytest

from scout.models import Category, Project
from scout.providers import LLMClient

# Environment variables that change how configuration resolves
SCOUT_ENV_VARS = (
    "SCOUT_LLM_API_KEY",
    "GEMINI_API_KEY",
    "SCOUT_TOP_N",
    "SCOUT_USE_AI",
    "SCOUT_LLM_MODEL",
    "SCOUT_AI_TIMEOUT",
    "SCOUT_NUM_RETRIES",
    "SCOUT_RECOMMEND_PROMPT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's credentials and overrides out of tests."""
    for name in SCOUT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for stores."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def isolated_cwd(temp_dir, monkeypatch):
    """Run in an empty directory so no scout.yaml or .env is picked up."""
    monkeypatch.chdir(temp_dir)
    return temp_dir


@pytest.fixture
def categories():
    return {
        "inventory": Category(name="Inventory"),
        "dashboard": Category(name="Dashboard"),
        "games": Category(name="Games"),
    }


@pytest.fixture
def sample_projects(categories):
    """Three approved projects plus one pending and one rejected."""
    return [
        Project(
            id="p-inventory",
            title="Inventory Manager",
            description="track stock levels",
            status="approved",
            categories=[categories["inventory"]],
        ),
        Project(
            id="p-recipes",
            title="Recipe Box",
            description="Save and share family recipes",
            status="approved",
        ),
        Project(
            id="p-chess",
            title="Chess Trainer",
            description="Practice openings against a bot",
            status="approved",
            categories=[categories["games"]],
        ),
        Project(
            id="p-pending",
            title="Inventory Scanner",
            description="Barcode inventory scanning",
            status="pending",
            categories=[categories["inventory"]],
        ),
        Project(
            id="p-rejected",
            title="Spam Inventory",
            description="Not a real project",
            status="rejected",
        ),
    ]


@pytest.fixture
def memory_store(sample_projects):
    from scout.stores import InMemoryProjectStore

    return InMemoryProjectStore(sample_projects)


@pytest.fixture
def data_dir(temp_dir, sample_projects):
    """A data directory holding a populated SQLite store."""
    from scout.config import get_store

    path = os.path.join(temp_dir, "data")
    get_store(path).put_many(sample_projects)
    return path


class MockLLMClient(LLMClient):
    """LLM client that returns a canned response and records prompts."""

    def __init__(self, response: str = "[]", error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[list[dict]] = []

    def complete(self, messages, temperature=None):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def mock_llm_client():
    """Factory for MockLLMClient instances."""
    return MockLLMClient
