# src/scout/stores/base.py
"""Abstract base class for project storage."""

from abc import ABC, abstractmethod

from scout.models import Category, Project, ProjectStatus, ProjectSummary


class ProjectStore(ABC):
    """Abstract base class for project storage.

    The solution search only ever calls ``list_approved``. The remaining
    methods exist so a store can be populated and moderated.
    """

    @abstractmethod
    def list_approved(self) -> list[ProjectSummary]:
        """List approved projects with their category names, in insertion order."""
        ...

    @abstractmethod
    def put(self, project: Project) -> None:
        """Store a project, overwriting if it exists."""
        ...

    @abstractmethod
    def put_many(self, projects: list[Project]) -> None:
        """Store multiple projects, overwriting if they exist."""
        ...

    @abstractmethod
    def get(self, project_id: str) -> Project | None:
        """Retrieve a project by ID. Returns None if not found."""
        ...

    @abstractmethod
    def get_by_slug(self, slug: str) -> Project | None:
        """Retrieve a project by slug. Returns None if not found."""
        ...

    @abstractmethod
    def list_projects(self, status: ProjectStatus | None = None) -> list[Project]:
        """List projects, optionally filtered by status."""
        ...

    @abstractmethod
    def set_status(self, project_id: str, status: ProjectStatus) -> bool:
        """Change a project's status. Returns False if the project does not exist."""
        ...

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """List all categories ordered by name."""
        ...

    @abstractmethod
    def count_projects(self, status: ProjectStatus | None = None) -> int:
        """Count projects, optionally filtered by status."""
        ...
