"""Transcript widget for conversation-style chat output."""

from __future__ import annotations

from typing import Any

from rich.console import Group
from rich.panel import Panel
from rich.text import Text
from textual.widgets import RichLog

from scout.models import ChatMessage, ScoredProject


def project_link(project: ScoredProject) -> str:
    """Detail page path for a project."""
    return f"/projects/{project.slug}"


def project_panel(project: ScoredProject) -> Panel:
    """Render one recommended project as a card."""
    body = Group(
        Text(project.description),
        Text(project_link(project), style="underline #5fafaf"),
    )
    return Panel(
        body,
        title=f"[bold]{project.title}[/bold]",
        title_align="left",
        border_style="#87d787",
        padding=(0, 1),
    )


class TranscriptView(RichLog):
    """Scrollable chat transcript with project cards."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(
            highlight=False,
            markup=False,
            wrap=True,
            **kwargs,
        )

    def write_user_message(self, text: str) -> None:
        """Display a user message with prompt prefix."""
        prompt = Text()
        prompt.append("> ", style="bold #ff8700")
        prompt.append(text, style="#ffaf5f")
        self.write(prompt)
        self.write("")

    def write_bot_message(self, text: str, projects: list[ScoredProject] | None = None) -> None:
        """Display a bot message followed by any recommended projects."""
        line = Text()
        line.append("scout ", style="bold #5fafaf")
        line.append(text)
        self.write(line)
        for project in projects or []:
            self.write(project_panel(project))
        self.write("")

    def write_message(self, message: ChatMessage) -> None:
        """Display a transcript entry."""
        if message.sender == "user":
            self.write_user_message(message.text)
        else:
            self.write_bot_message(message.text, message.projects)

    def write_info(self, message: str) -> None:
        """Display an info message."""
        self.write(Text(message, style="dim"))

    def write_warning(self, message: str) -> None:
        """Display a warning message."""
        text = Text()
        text.append(" ", style="#ffaf5f")
        text.append(message, style="#ffaf5f")
        self.write(text)
