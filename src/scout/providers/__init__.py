# src/scout/providers/__init__.py
"""LLM provider clients for Project Scout.

- LLMClient: Abstract base class for LLM completion providers
- LiteLLMClient: LiteLLM implementation (Gemini, OpenAI, Anthropic, Bedrock, ...)

Usage:
    from scout.providers import LLMClient
    from scout.providers.litellm import LiteLLMClient, ChatModels
"""

from scout.providers.base import LLMClient
from scout.providers.litellm import ChatModels, LiteLLMClient

__all__ = [
    "LLMClient",
    "ChatModels",
    "LiteLLMClient",
]
