"""Tests for the chat screen."""

import asyncio

import pytest

pytest.importorskip("textual", reason="Tests require textual package")

from scout.chat import GREETING, ChatSession, found_message
from scout.models import SearchResult
from scout.tui.app import ScoutTUI
from scout.tui.screens.chat import ChatScreen
from scout.tui.widgets.input_area import ChatInput
from scout.tui.widgets.status_bar import StatusBar


class TestChatScreen:
    @pytest.mark.asyncio
    async def test_mounts_with_greeting(self, isolated_cwd, data_dir) -> None:
        """The chat opens on the greeting and counts approved projects."""
        app = ScoutTUI(data_dir=data_dir)
        async with app.run_test() as pilot:
            await pilot.pause()
            screen = app.screen

            assert isinstance(screen, ChatScreen)
            assert [m.text for m in screen.session.transcript] == [GREETING]
            assert screen.query_one(StatusBar).projects == 3

    @pytest.mark.asyncio
    async def test_submit_runs_search(self, isolated_cwd, data_dir) -> None:
        """A submitted problem appends the user message and one reply."""
        app = ScoutTUI(data_dir=data_dir)
        async with app.run_test() as pilot:
            await pilot.pause()
            screen = app.screen

            await screen.on_chat_input_submitted(ChatInput.Submitted("chess practice"))
            await screen._current_task
            await pilot.pause()

            transcript = screen.session.transcript
            assert [m.sender for m in transcript] == ["bot", "user", "bot"]
            assert transcript[-1].text == found_message(1)
            assert transcript[-1].projects[0].id == "p-chess"
            assert screen.query_one(ChatInput).disabled is False
            assert screen.query_one(StatusBar).searching is False

    @pytest.mark.asyncio
    async def test_second_submit_ignored_while_searching(self, isolated_cwd, data_dir) -> None:
        """A submit during a search neither starts a search nor re-enables input."""
        release = asyncio.Event()
        problems = []

        async def slow_search(problem):
            problems.append(problem)
            await release.wait()
            return SearchResult(success=True, data=[])

        app = ScoutTUI(data_dir=data_dir)
        async with app.run_test() as pilot:
            await pilot.pause()
            screen = app.screen
            screen._session = ChatSession(slow_search, on_message=screen._on_chat_message)

            await screen.on_chat_input_submitted(ChatInput.Submitted("first"))
            first_task = screen._current_task
            await pilot.pause()
            await screen.on_chat_input_submitted(ChatInput.Submitted("second"))
            await pilot.pause()

            assert screen._current_task is first_task
            assert screen.query_one(ChatInput).disabled is True
            assert screen.query_one(StatusBar).searching is True

            release.set()
            await first_task
            await pilot.pause()

            assert problems == ["first"]
            assert screen.query_one(ChatInput).disabled is False
            assert screen.query_one(StatusBar).searching is False
