# src/scout/providers/base.py
"""Abstract base class for LLM providers."""

import asyncio
from abc import ABC, abstractmethod

Messages = list[dict]


class LLMClient(ABC):
    """A chat-completion backend used by the AI recommender.

    A provider is a stateless one-shot call from prompt to response text: no
    streaming and no conversation state. Errors are raised as-is; the search
    pipeline treats any of them as a failed recommendation.

    Example:
        class CannedClient(LLMClient):
            def complete(self, messages, temperature=None):
                return '["p-1", "p-2"]'
    """

    @abstractmethod
    def complete(self, messages: Messages, temperature: float | None = None) -> str:
        """Return the model's reply to ``messages``.

        ``messages`` uses the OpenAI chat shape, e.g.
        ``[{"role": "user", "content": "..."}]``. ``temperature=None`` leaves
        the provider default in place.
        """
        ...

    async def acomplete(self, messages: Messages, temperature: float | None = None) -> str:
        """Async variant of complete().

        The default runs complete() on a worker thread so the event loop, and
        any timeout wrapped around this call, keep running.
        """
        return await asyncio.to_thread(self.complete, messages, temperature)
