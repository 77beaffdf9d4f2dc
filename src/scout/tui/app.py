"""Main TUI application for Project Scout."""

from __future__ import annotations

from typing import Any

from textual.app import App
from textual.binding import Binding

from scout.tui.screens.chat import ChatScreen


class ScoutTUI(App[None]):
    """Project Scout chat - describe a problem, get matching projects."""

    TITLE = "scout"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=True),
        Binding("ctrl+l", "clear", "Clear", show=True),
    ]

    def __init__(
        self,
        data_dir: str | None = None,
        config_path: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self._data_dir = data_dir
        self._config_path = config_path

    def on_mount(self) -> None:
        """Set up the initial screen."""
        self.push_screen(ChatScreen(data_dir=self._data_dir, config_path=self._config_path))

    async def action_quit(self) -> None:
        """Quit the application."""
        self.exit()

    def action_clear(self) -> None:
        """Clear the transcript on the current screen."""
        if isinstance(self.screen, ChatScreen):
            self.screen.clear()


def main() -> None:
    """Entry point for the TUI."""
    from scout.config import load_env_file

    load_env_file()
    app = ScoutTUI()
    app.run()


if __name__ == "__main__":
    main()
