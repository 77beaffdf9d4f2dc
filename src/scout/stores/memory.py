# src/scout/stores/memory.py
"""In-memory project store."""

from scout.models import Category, Project, ProjectStatus, ProjectSummary
from scout.stores.base import ProjectStore


class InMemoryProjectStore(ProjectStore):
    """Dict-backed project store. Useful for tests and embedding in other apps."""

    def __init__(self, projects: list[Project] | None = None) -> None:
        self._projects: dict[str, Project] = {}
        if projects:
            self.put_many(projects)

    def list_approved(self) -> list[ProjectSummary]:
        return [p.to_summary() for p in self._projects.values() if p.status == "approved"]

    def put(self, project: Project) -> None:
        self._projects[project.id] = project.model_copy(deep=True)

    def put_many(self, projects: list[Project]) -> None:
        for project in projects:
            self.put(project)

    def get(self, project_id: str) -> Project | None:
        project = self._projects.get(project_id)
        return project.model_copy(deep=True) if project else None

    def get_by_slug(self, slug: str) -> Project | None:
        for project in self._projects.values():
            if project.slug == slug:
                return project.model_copy(deep=True)
        return None

    def list_projects(self, status: ProjectStatus | None = None) -> list[Project]:
        return [
            p.model_copy(deep=True)
            for p in self._projects.values()
            if status is None or p.status == status
        ]

    def set_status(self, project_id: str, status: ProjectStatus) -> bool:
        project = self._projects.get(project_id)
        if project is None:
            return False
        self._projects[project_id] = project.model_copy(update={"status": status})
        return True

    def list_categories(self) -> list[Category]:
        seen: dict[str, Category] = {}
        for project in self._projects.values():
            for category in project.categories:
                seen.setdefault(category.id, category)
        return sorted(seen.values(), key=lambda c: c.name)

    def count_projects(self, status: ProjectStatus | None = None) -> int:
        return len(self.list_projects(status))
