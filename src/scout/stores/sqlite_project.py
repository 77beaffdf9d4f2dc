# src/scout/stores/sqlite_project.py
"""SQLite project store implementation."""

import sqlite3
from datetime import datetime
from pathlib import Path

from scout.models import Category, Project, ProjectStatus, ProjectSummary
from scout.stores.base import ProjectStore

_PROJECT_COLUMNS = (
    "id, title, slug, description, status, github_url, website_url, author_name, created_at"
)


class SQLiteProjectStore(ProjectStore):
    """SQLite-based project store.

    Projects, categories and their associations live in three tables. Rows are
    read back in insertion order (``rowid``), which is the corpus order the
    keyword ranker relies on for tie-breaking.
    """

    def __init__(self, db_path: str) -> None:
        """Initialize the SQLite store."""
        self.db_path = db_path
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self) -> None:
        """Create tables if they don't exist."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS projects (
                    id TEXT PRIMARY KEY,
                    title TEXT NOT NULL,
                    slug TEXT NOT NULL UNIQUE,
                    description TEXT NOT NULL,
                    status TEXT NOT NULL,
                    github_url TEXT,
                    website_url TEXT,
                    author_name TEXT,
                    created_at TEXT NOT NULL
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS categories (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    color TEXT NOT NULL
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS project_categories (
                    project_id TEXT NOT NULL,
                    category_id TEXT NOT NULL,
                    PRIMARY KEY (project_id, category_id)
                )
            """)
            conn.execute("CREATE INDEX IF NOT EXISTS idx_status ON projects(status)")
            conn.commit()

    def _write(self, conn: sqlite3.Connection, project: Project) -> None:
        # UPSERT keeps the original rowid so corpus order survives updates
        conn.execute(
            f"""
            INSERT INTO projects ({_PROJECT_COLUMNS})
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                title = excluded.title,
                slug = excluded.slug,
                description = excluded.description,
                status = excluded.status,
                github_url = excluded.github_url,
                website_url = excluded.website_url,
                author_name = excluded.author_name,
                created_at = excluded.created_at
            """,
            (
                project.id,
                project.title,
                project.slug,
                project.description,
                project.status,
                project.github_url,
                project.website_url,
                project.author_name,
                project.created_at.isoformat(),
            ),
        )
        conn.execute("DELETE FROM project_categories WHERE project_id = ?", (project.id,))
        for category in project.categories:
            conn.execute(
                """
                INSERT INTO categories (id, name, color) VALUES (?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET name = excluded.name, color = excluded.color
                """,
                (category.id, category.name, category.color),
            )
            conn.execute(
                "INSERT OR IGNORE INTO project_categories (project_id, category_id) VALUES (?, ?)",
                (project.id, category.id),
            )

    def _categories_for(self, conn: sqlite3.Connection, project_id: str) -> list[Category]:
        cursor = conn.execute(
            """
            SELECT c.id, c.name, c.color
            FROM project_categories pc JOIN categories c ON c.id = pc.category_id
            WHERE pc.project_id = ?
            ORDER BY pc.rowid
            """,
            (project_id,),
        )
        return [Category(id=row[0], name=row[1], color=row[2]) for row in cursor.fetchall()]

    def _row_to_project(self, conn: sqlite3.Connection, row: tuple) -> Project:
        return Project(
            id=row[0],
            title=row[1],
            slug=row[2],
            description=row[3],
            status=row[4],
            github_url=row[5],
            website_url=row[6],
            author_name=row[7],
            created_at=datetime.fromisoformat(row[8]),
            categories=self._categories_for(conn, row[0]),
        )

    def list_approved(self) -> list[ProjectSummary]:
        """List approved projects with category names."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                """
                SELECT id, title, slug, description
                FROM projects WHERE status = 'approved'
                ORDER BY rowid
                """
            )
            rows = cursor.fetchall()
            return [
                ProjectSummary(
                    id=row[0],
                    title=row[1],
                    slug=row[2],
                    description=row[3],
                    category_names=[c.name for c in self._categories_for(conn, row[0])],
                )
                for row in rows
            ]

    def put(self, project: Project) -> None:
        """Store a project, overwriting if exists."""
        with sqlite3.connect(self.db_path) as conn:
            self._write(conn, project)
            conn.commit()

    def put_many(self, projects: list[Project]) -> None:
        """Store multiple projects in one transaction."""
        if not projects:
            return
        with sqlite3.connect(self.db_path) as conn:
            for project in projects:
                self._write(conn, project)
            conn.commit()

    def get(self, project_id: str) -> Project | None:
        """Retrieve a project by ID."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                f"SELECT {_PROJECT_COLUMNS} FROM projects WHERE id = ?",
                (project_id,),
            )
            row = cursor.fetchone()
            if row is None:
                return None
            return self._row_to_project(conn, row)

    def get_by_slug(self, slug: str) -> Project | None:
        """Retrieve a project by slug."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                f"SELECT {_PROJECT_COLUMNS} FROM projects WHERE slug = ?",
                (slug,),
            )
            row = cursor.fetchone()
            if row is None:
                return None
            return self._row_to_project(conn, row)

    def list_projects(self, status: ProjectStatus | None = None) -> list[Project]:
        """List projects, optionally filtered by status."""
        with sqlite3.connect(self.db_path) as conn:
            if status is None:
                cursor = conn.execute(f"SELECT {_PROJECT_COLUMNS} FROM projects ORDER BY rowid")
            else:
                cursor = conn.execute(
                    f"SELECT {_PROJECT_COLUMNS} FROM projects WHERE status = ? ORDER BY rowid",
                    (status,),
                )
            return [self._row_to_project(conn, row) for row in cursor.fetchall()]

    def set_status(self, project_id: str, status: ProjectStatus) -> bool:
        """Change a project's status."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                "UPDATE projects SET status = ? WHERE id = ?",
                (status, project_id),
            )
            conn.commit()
            return cursor.rowcount > 0

    def list_categories(self) -> list[Category]:
        """List all categories ordered by name."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute("SELECT id, name, color FROM categories ORDER BY name")
            return [Category(id=row[0], name=row[1], color=row[2]) for row in cursor.fetchall()]

    def count_projects(self, status: ProjectStatus | None = None) -> int:
        """Count projects, optionally filtered by status."""
        with sqlite3.connect(self.db_path) as conn:
            if status is None:
                cursor = conn.execute("SELECT COUNT(id) FROM projects")
            else:
                cursor = conn.execute("SELECT COUNT(id) FROM projects WHERE status = ?", (status,))
            count = cursor.fetchone()
            return count[0] if count else 0
