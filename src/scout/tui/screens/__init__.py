"""Scout TUI screens."""

from scout.tui.screens.chat import ChatScreen

__all__ = ["ChatScreen"]
