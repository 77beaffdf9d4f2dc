"""Chat screen: transcript, status bar and input around a ChatSession."""

from __future__ import annotations

import asyncio
import logging
import os
from functools import partial
from typing import Any

from textual.app import ComposeResult
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import Footer

from scout.chat import ChatSession
from scout.commands.search import asearch_project_solutions
from scout.config import ConfigError, get_scout_config, get_store
from scout.models import ChatMessage
from scout.tui.widgets.input_area import ChatInput, InputArea
from scout.tui.widgets.status_bar import StatusBar
from scout.tui.widgets.transcript import TranscriptView

logger = logging.getLogger(__name__)


class ChatScreen(Screen[None]):
    """Main chat screen with transcript, status bar, and input."""

    DEFAULT_CSS = """
    ChatScreen {
        layout: vertical;
    }

    #transcript {
        height: 1fr;
        padding: 0 1;
    }

    #status-bar {
        height: 1;
        background: $surface;
    }

    InputArea {
        height: auto;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        data_dir: str | None = None,
        config_path: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self._data_dir = data_dir
        self._config_path = config_path
        self._current_task: asyncio.Task[None] | None = None
        self._session = ChatSession(
            partial(asearch_project_solutions, data_dir=data_dir, config_path=config_path),
            on_message=self._on_chat_message,
        )

    @property
    def session(self) -> ChatSession:
        return self._session

    def compose(self) -> ComposeResult:
        """Compose the chat screen layout."""
        yield TranscriptView(id="transcript")
        yield StatusBar(id="status-bar")
        yield InputArea()
        yield Footer()

    def on_mount(self) -> None:
        """Replay the greeting and check the corpus."""
        transcript = self.query_one("#transcript", TranscriptView)
        for message in self._session.transcript:
            transcript.write_message(message)

        self._update_status_bar()
        self.call_after_refresh(self._focus_input)

    def _focus_input(self) -> None:
        """Focus the chat input."""
        try:
            self.query_one(ChatInput).focus()
        except NoMatches:
            self.set_timer(0.1, self._focus_input)

    def _update_status_bar(self) -> None:
        """Show approved project count and ranking mode."""
        status_bar = self.query_one("#status-bar", StatusBar)
        transcript = self.query_one("#transcript", TranscriptView)

        config = get_scout_config(self._data_dir, self._config_path)
        if isinstance(config, ConfigError):
            transcript.write_warning(config.message)
            return

        model = config.settings.llm_model
        if "/" in model:
            model = model.split("/")[-1]
        status_bar.update_stats(model=model, ai_enabled=config.ai_enabled)

        if not os.path.exists(config.data_dir):
            status_bar.update_stats(projects=0)
            return

        try:
            status_bar.update_stats(projects=get_store(config.data_dir).count_projects("approved"))
        except Exception:
            logger.exception("Could not count projects in %s", config.data_dir)
            status_bar.update_stats(projects=0)

    def _on_chat_message(self, message: ChatMessage) -> None:
        # The greeting is appended before compose; on_mount replays it.
        if not self.is_mounted:
            return
        self.query_one("#transcript", TranscriptView).write_message(message)

    def _set_awaiting(self, awaiting: bool) -> None:
        self.query_one("#status-bar", StatusBar).searching = awaiting
        chat_input = self.query_one(ChatInput)
        chat_input.disabled = awaiting
        if not awaiting:
            chat_input.focus()

    async def on_chat_input_submitted(self, event: ChatInput.Submitted) -> None:
        """Start a search for the submitted problem."""
        if self._current_task is not None and not self._current_task.done():
            return
        self._set_awaiting(True)
        self._current_task = asyncio.create_task(self._submit(event.value))
        self._current_task.add_done_callback(self._on_submit_done)

    async def _submit(self, text: str) -> None:
        try:
            await self._session.submit(text)
        finally:
            self._set_awaiting(False)

    def _on_submit_done(self, task: asyncio.Task[None]) -> None:
        if task.cancelled() or not self.is_mounted:
            return
        if (error := task.exception()) is not None:
            logger.error("Chat submission failed", exc_info=error)
            self.query_one("#transcript", TranscriptView).write_warning(
                "Something went wrong. Please try again."
            )

    def clear(self) -> None:
        """Clear the visible transcript."""
        self.query_one("#transcript", TranscriptView).clear()
