# src/scout/models/results.py
"""Result data models for solution searches."""

from pydantic import BaseModel, ConfigDict, Field


class ScoredProject(BaseModel):
    """A project matched to a problem statement.

    ``score`` only orders results within a single ranking call; it is not a
    probability and is not comparable across calls.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    slug: str
    description: str
    score: float


class SearchResult(BaseModel):
    """Outcome of one solution search, as every caller sees it."""

    success: bool
    data: list[ScoredProject] = Field(default_factory=list)
    error: str | None = None
