"""Status bar widget showing corpus and recommender info."""

from __future__ import annotations

from typing import Any

from rich.text import Text
from textual.reactive import reactive
from textual.widgets import Static


class StatusBar(Static):
    """Status bar showing approved projects, ranking mode and search activity."""

    projects: reactive[int] = reactive(0)
    model: reactive[str] = reactive("")
    ai_enabled: reactive[bool] = reactive(False)
    searching: reactive[bool] = reactive(False)

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)

    def render(self) -> Text:
        """Render the status bar content."""
        text = Text()

        if self.projects == 0:
            text.append(" No approved projects ", style="dim")
            text.append("| ", style="dim")
            text.append("Run ", style="dim")
            text.append("scout load <file> --approve", style="#ff8700")
            text.append(" to get started", style="dim")
        else:
            text.append(" ", style="#ff8700")
            text.append(f"{self.projects:,}", style="bold #ff8700")
            text.append(" projects", style="dim")

        text.append("  |  ", style="dim")
        if self.ai_enabled and self.model:
            text.append(self.model, style="#5fafaf dim")
        else:
            text.append("keyword ranking", style="#5fafaf dim")

        if self.searching:
            text.append("  |  ", style="dim")
            text.append("Searching...", style="#ffaf5f")

        return text

    def update_stats(
        self,
        projects: int | None = None,
        model: str | None = None,
        ai_enabled: bool | None = None,
    ) -> None:
        """Update the status bar statistics."""
        if projects is not None:
            self.projects = projects
        if model is not None:
            self.model = model
        if ai_enabled is not None:
            self.ai_enabled = ai_enabled
