"""TUI widgets for Project Scout."""

from scout.tui.widgets.input_area import ChatInput, InputArea
from scout.tui.widgets.status_bar import StatusBar
from scout.tui.widgets.transcript import TranscriptView

__all__ = [
    "ChatInput",
    "InputArea",
    "StatusBar",
    "TranscriptView",
]
