# src/scout/chat.py
"""Chat session: an append-only transcript around one search at a time."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from enum import Enum

from scout.models import ChatMessage, SearchResult

logger = logging.getLogger(__name__)

GREETING = (
    "Hi! I'm your Project Scout. Tell me about a problem you're trying to solve, "
    "and I'll find building logs or projects that can help!"
)
NO_MATCH_MESSAGE = (
    "I couldn't find a specific project matching that exact problem, "
    "but you might want to explore our categories for inspiration."
)
RETRY_MESSAGE = "I'm having a bit of trouble searching right now. Try again in a moment!"

SearchFunction = Callable[[str], Awaitable[SearchResult]]
MessageCallback = Callable[[ChatMessage], None]


def found_message(count: int) -> str:
    noun = "project" if count == 1 else "projects"
    return f"I found {count} {noun} that might solve your problem!"


class ChatState(Enum):
    """States of a chat session."""

    IDLE = "idle"
    AWAITING = "awaiting"


class ChatSession:
    """Mediates one in-flight search at a time and records the conversation.

    The transcript only grows: each accepted submit appends the user's message,
    then exactly one bot reply once the search resolves. Submits that arrive
    while a search is outstanding, or that are blank, are ignored.

    Example:
        session = ChatSession(searcher.asearch)
        reply = await session.submit("I need a way to track inventory")
    """

    def __init__(
        self,
        search: SearchFunction,
        on_message: MessageCallback | None = None,
        greeting: str | None = GREETING,
    ) -> None:
        """Initialize the session.

        Args:
            search: Async function mapping a problem statement to a SearchResult
            on_message: Called with every message appended to the transcript
            greeting: Opening bot message, or None to start empty
        """
        self._search = search
        self._on_message = on_message
        self._transcript: list[ChatMessage] = []
        self._state = ChatState.IDLE
        if greeting:
            self._append(ChatMessage(sender="bot", text=greeting))

    @property
    def state(self) -> ChatState:
        return self._state

    @property
    def is_awaiting(self) -> bool:
        return self._state is ChatState.AWAITING

    @property
    def transcript(self) -> tuple[ChatMessage, ...]:
        return tuple(self._transcript)

    def _append(self, message: ChatMessage) -> None:
        self._transcript.append(message)
        if self._on_message is not None:
            self._on_message(message)

    def _reply_for(self, result: SearchResult) -> ChatMessage:
        if result.success and result.data:
            return ChatMessage(
                sender="bot",
                text=found_message(len(result.data)),
                projects=list(result.data),
            )
        return ChatMessage(sender="bot", text=NO_MATCH_MESSAGE)

    async def submit(self, text: str) -> ChatMessage | None:
        """Send a problem statement and wait for the bot's reply.

        Args:
            text: What the user typed

        Returns:
            The bot reply, or None if the submit was ignored
        """
        if not text.strip() or self._state is ChatState.AWAITING:
            return None

        self._append(ChatMessage(sender="user", text=text))
        self._state = ChatState.AWAITING
        try:
            try:
                result = await self._search(text)
                reply = self._reply_for(result)
            except Exception:
                logger.exception("Search raised during chat submit")
                reply = ChatMessage(sender="bot", text=RETRY_MESSAGE)
            self._append(reply)
        finally:
            self._state = ChatState.IDLE

        return reply
