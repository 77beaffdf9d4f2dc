"""Data models for Project Scout."""

from scout.models.chat import ChatMessage, Sender
from scout.models.project import Category, Project, ProjectStatus, ProjectSummary, slugify
from scout.models.results import ScoredProject, SearchResult

__all__ = [
    "Category",
    "ChatMessage",
    "Project",
    "ProjectStatus",
    "ProjectSummary",
    "ScoredProject",
    "SearchResult",
    "Sender",
    "slugify",
]
