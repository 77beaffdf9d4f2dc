# src/scout/providers/litellm/__init__.py
"""LiteLLM provider client for Project Scout.

Usage:
    from scout.providers.litellm import LiteLLMClient, ChatModels

    client = LiteLLMClient(model=ChatModels.GEMINI_25_FLASH, api_key="...")
"""

from scout.providers.litellm.client import LiteLLMClient
from scout.providers.litellm.models import ChatModels

__all__ = [
    "ChatModels",
    "LiteLLMClient",
]
