# src/scout/providers/litellm/client.py
"""LiteLLM client implementation."""

from typing import Any

import litellm

from scout.providers.base import LLMClient
from scout.providers.litellm.models import ChatModels


class LiteLLMClient(LLMClient):
    """LiteLLM-based LLM client for text generation.

    Supports any model available through LiteLLM (Gemini, OpenAI, Anthropic,
    Bedrock, Ollama, etc.).

    Example:
        from scout.providers.litellm import LiteLLMClient, ChatModels

        client = LiteLLMClient(model=ChatModels.GEMINI_25_FLASH, api_key=key)
        response = client.complete([{"role": "user", "content": "Hello"}])
    """

    def __init__(
        self,
        model: str = ChatModels.GEMINI_25_FLASH,
        api_key: str | None = None,
        num_retries: int = 2,
        timeout: float | None = None,
    ) -> None:
        """Initialize the LiteLLM client.

        Args:
            model: LiteLLM model identifier.
                   Examples: "gemini/gemini-2.5-flash", "openai/gpt-5-mini"
            api_key: Provider API key. If None, LiteLLM reads the provider's
                     own environment variable (e.g. GEMINI_API_KEY).
            num_retries: Number of retries on rate limit errors. LiteLLM handles
                         exponential backoff automatically.
            timeout: Per-request timeout in seconds. None for the LiteLLM default.
        """
        self.model = model
        self.api_key = api_key
        self.num_retries = num_retries
        self.timeout = timeout

    def _completion_kwargs(
        self, messages: list[dict], temperature: float | None
    ) -> dict[str, Any]:
        completion_kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "drop_params": True,
            "num_retries": self.num_retries,
        }
        if temperature is not None:
            completion_kwargs["temperature"] = temperature
        if self.api_key:
            completion_kwargs["api_key"] = self.api_key
        if self.timeout is not None:
            completion_kwargs["timeout"] = self.timeout
        return completion_kwargs

    def _extract_content(self, response: Any) -> str:
        if not response.choices:
            raise ValueError(f"LLM returned no choices for model {self.model}")
        content = response.choices[0].message.content
        if content is None:
            raise ValueError(f"LLM returned None content for model {self.model}")
        return str(content)

    def complete(
        self,
        messages: list[dict],
        temperature: float | None = None,
    ) -> str:
        """Generate a completion using LiteLLM."""
        response = litellm.completion(**self._completion_kwargs(messages, temperature))
        return self._extract_content(response)

    async def acomplete(
        self,
        messages: list[dict],
        temperature: float | None = None,
    ) -> str:
        """Generate a completion using LiteLLM (async)."""
        response = await litellm.acompletion(**self._completion_kwargs(messages, temperature))
        return self._extract_content(response)
