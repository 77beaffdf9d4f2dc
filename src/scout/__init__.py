"""Project Scout - match problem statements to showcase projects.

Ranks approved projects against a free-text problem, asking an LLM first
when a credential is configured and falling back to deterministic keyword
ranking otherwise.

Quick Start:
    from scout import Scout, SQLiteProjectStore
    from scout.providers.litellm import LiteLLMClient

    scout = Scout(
        store=SQLiteProjectStore("./scout_data/projects.db"),
        llm_client=LiteLLMClient(api_key=os.environ["GEMINI_API_KEY"]),
    )
    result = scout.search("I need a way to track inventory")

Configured from scout.yaml / environment:
    from scout import search_project_solutions

    result = search_project_solutions("Dashboard for react")
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("project-scout")
except PackageNotFoundError:
    __version__ = "unknown"

# Chat loop
from scout.chat import ChatSession, ChatState

# Public entry point
from scout.commands.search import search_project_solutions

# Core models
from scout.models import (
    Category,
    ChatMessage,
    Project,
    ProjectSummary,
    ScoredProject,
    SearchResult,
)

# Provider ABC
from scout.providers import LLMClient

# Ranking
from scout.ranking import AIRecommender, KeywordRanker, Ranker, RecommendationError

# Central configuration
from scout.scout import Scout
from scout.search import SolutionSearch

# Configuration
from scout.settings import Settings

# Storage
from scout.stores import InMemoryProjectStore, ProjectStore, SQLiteProjectStore

__all__ = [
    # Version
    "__version__",
    # Models
    "Category",
    "ChatMessage",
    "Project",
    "ProjectSummary",
    "ScoredProject",
    "SearchResult",
    # Config
    "Settings",
    # Storage
    "InMemoryProjectStore",
    "ProjectStore",
    "SQLiteProjectStore",
    # Providers
    "LLMClient",
    # Ranking
    "AIRecommender",
    "KeywordRanker",
    "Ranker",
    "RecommendationError",
    # Pipelines
    "ChatSession",
    "ChatState",
    "SolutionSearch",
    "search_project_solutions",
    # Central configuration
    "Scout",
]
