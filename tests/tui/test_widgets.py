"""Tests for TUI widgets."""

from rich.panel import Panel

from scout.models import ScoredProject
from scout.tui.widgets.input_area import MessageHistory
from scout.tui.widgets.status_bar import StatusBar
from scout.tui.widgets.transcript import project_link, project_panel


class TestMessageHistory:
    """Tests for the input history."""

    def test_empty(self) -> None:
        history = MessageHistory()
        assert history.older("draft") is None
        assert history.newer() is None

    def test_record(self) -> None:
        history = MessageHistory()
        history.record("track inventory")
        history.record("chess practice")

        assert history.entries == ["track inventory", "chess practice"]

    def test_skips_consecutive_duplicates(self) -> None:
        history = MessageHistory()
        history.record("dashboard")
        history.record("dashboard")

        assert history.entries == ["dashboard"]

    def test_strips_and_skips_empty(self) -> None:
        history = MessageHistory()
        history.record("  dashboard  ")
        history.record("   ")

        assert history.entries == ["dashboard"]

    def test_limit(self) -> None:
        history = MessageHistory(limit=2)
        for text in ("one", "two", "three"):
            history.record(text)

        assert history.entries == ["two", "three"]

    def test_browse_restores_draft(self) -> None:
        history = MessageHistory()
        history.record("first")
        history.record("second")

        assert history.older("half typed") == "second"
        assert history.browsing is True
        assert history.older("ignored") == "first"
        assert history.older("ignored") is None
        assert history.newer() == "second"
        assert history.newer() == "half typed"
        assert history.browsing is False


class TestStatusBar:
    """Tests for StatusBar widget."""

    def test_initial_state(self) -> None:
        """Test initial state of status bar."""
        bar = StatusBar()
        assert bar.projects == 0
        assert bar.model == ""
        assert bar.ai_enabled is False
        assert bar.searching is False

    def test_update_stats(self) -> None:
        """Test updating status bar stats."""
        bar = StatusBar()
        bar.update_stats(projects=12, model="gemini-2.5-flash", ai_enabled=True)

        assert bar.projects == 12
        assert bar.model == "gemini-2.5-flash"
        assert bar.ai_enabled is True

    def test_partial_update(self) -> None:
        """Test partial updates to status bar."""
        bar = StatusBar()
        bar.update_stats(projects=5)
        bar.update_stats(model="gpt-5-mini")

        assert bar.projects == 5
        assert bar.model == "gpt-5-mini"

    def test_render_keyword_mode(self) -> None:
        """Without AI the status bar names keyword ranking."""
        bar = StatusBar()
        bar.update_stats(projects=3, model="gemini-2.5-flash", ai_enabled=False)

        text = bar.render().plain
        assert "3 projects" in text
        assert "keyword ranking" in text
        assert "gemini" not in text

    def test_render_searching(self) -> None:
        """Test the searching indicator."""
        bar = StatusBar()
        bar.searching = True

        assert "Searching..." in bar.render().plain


class TestProjectCards:
    """Tests for transcript project rendering helpers."""

    def test_project_link(self) -> None:
        project = ScoredProject(
            id="1", title="Inventory Manager", slug="inventory-manager", description="", score=10
        )
        assert project_link(project) == "/projects/inventory-manager"

    def test_project_panel(self) -> None:
        project = ScoredProject(
            id="1", title="Inventory Manager", slug="inventory-manager", description="", score=10
        )
        panel = project_panel(project)

        assert isinstance(panel, Panel)
        assert "Inventory Manager" in str(panel.title)
