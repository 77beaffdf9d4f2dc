"""Anchored chat input with message history."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.app import ComposeResult
from textual.containers import Container
from textual.message import Message
from textual.widgets import Input

if TYPE_CHECKING:
    from textual.events import Key

MAX_HISTORY = 50


class MessageHistory:
    """Previously sent problems, browsable newest-first.

    While browsing, the unsent draft is parked and handed back when the
    user moves past the newest entry.
    """

    def __init__(self, limit: int = MAX_HISTORY) -> None:
        self.limit = limit
        self.entries: list[str] = []
        self._cursor: int | None = None
        self._draft = ""

    @property
    def browsing(self) -> bool:
        return self._cursor is not None

    def record(self, text: str) -> None:
        text = text.strip()
        if text and (not self.entries or self.entries[-1] != text):
            self.entries.append(text)
            del self.entries[: -self.limit]
        self._cursor = None
        self._draft = ""

    def older(self, draft: str) -> str | None:
        """Step back one entry. Returns None when there is nothing older."""
        if not self.entries:
            return None
        if self._cursor is None:
            self._draft = draft
            self._cursor = len(self.entries) - 1
        elif self._cursor > 0:
            self._cursor -= 1
        else:
            return None
        return self.entries[self._cursor]

    def newer(self) -> str | None:
        """Step forward one entry, ending on the parked draft."""
        if self._cursor is None:
            return None
        if self._cursor < len(self.entries) - 1:
            self._cursor += 1
            return self.entries[self._cursor]
        self._cursor = None
        return self._draft


class ChatInput(Input):
    """Single-line problem input. Enter sends, up/down recall."""

    BINDINGS = [
        ("up", "history_prev", "Previous message"),
        ("down", "history_next", "Next message"),
        ("escape", "clear_input", "Clear"),
    ]

    class Submitted(Message):
        """Posted when a message is submitted."""

        def __init__(self, value: str) -> None:
            self.value = value
            super().__init__()

    def __init__(
        self,
        placeholder: str = "Describe the problem you're trying to solve...",
        *,
        id: str | None = None,
    ) -> None:
        super().__init__(placeholder=placeholder, id=id)
        self.history = MessageHistory()

    def _show(self, text: str | None) -> None:
        if text is None:
            return
        self.value = text
        self.cursor_position = len(text)

    def action_history_prev(self) -> None:
        self._show(self.history.older(self.value))

    def action_history_next(self) -> None:
        self._show(self.history.newer())

    def action_clear_input(self) -> None:
        self.value = ""

    async def _on_key(self, event: Key) -> None:
        if event.key != "enter":
            return
        event.stop()
        event.prevent_default()
        # ignored while a search is in flight
        text = self.value.strip()
        if not text or self.disabled:
            return
        self.post_message(self.Submitted(text))
        self.history.record(text)
        self.value = ""


class InputArea(Container):
    """Container for the anchored input at the bottom of the screen."""

    def compose(self) -> ComposeResult:
        yield ChatInput(id="chat-input")
