# src/scout/models/project.py
"""Project and category data models."""

import re
from datetime import datetime, timezone
from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator

ProjectStatus = Literal["pending", "approved", "rejected"]


def slugify(name: str) -> str:
    """Lowercase a name and collapse every run of non-alphanumerics into '-'."""
    return re.sub(r"[^a-z0-9]+", "-", name.lower())


class Category(BaseModel):
    """A category a project can be filed under."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    color: str = "#6b7280"

    @property
    def slug(self) -> str:
        return slugify(self.name)


class Project(BaseModel):
    """A community-submitted project."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    title: str
    slug: str = ""
    description: str
    status: ProjectStatus = "pending"
    categories: list[Category] = Field(default_factory=list)
    github_url: str | None = None
    website_url: str | None = None
    author_name: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @model_validator(mode="after")
    def default_slug(self) -> "Project":
        # titles without ASCII alphanumerics slug to nothing; the id stays unique
        if not self.slug:
            self.slug = slugify(self.title).strip("-") or self.id
        return self

    def to_summary(self) -> "ProjectSummary":
        """Project the fields the solution search reads."""
        return ProjectSummary(
            id=self.id,
            title=self.title,
            slug=self.slug,
            description=self.description,
            category_names=[c.name for c in self.categories],
        )


class ProjectSummary(BaseModel):
    """Read-only view of an approved project, loaded fresh for each search."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    slug: str
    description: str
    category_names: tuple[str, ...] = ()
