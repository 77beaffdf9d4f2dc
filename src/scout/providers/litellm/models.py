# src/scout/providers/litellm/models.py
"""Curated chat model constants for the LiteLLM provider.

You can always pass any valid LiteLLM model string directly.
"""


class ChatModels:
    """Chat/completion models for AIRecommender (via LiteLLMClient)."""

    # Google Gemini
    GEMINI_25_FLASH = "gemini/gemini-2.5-flash"
    GEMINI_25_PRO = "gemini/gemini-2.5-pro"
    GEMINI_3_FLASH = "gemini/gemini-3-flash-preview"

    # OpenAI
    GPT_5_MINI = "openai/gpt-5-mini"
    GPT_5_NANO = "openai/gpt-5-nano"

    # Anthropic
    CLAUDE_HAIKU_45 = "anthropic/claude-haiku-4-5-20251001"
    CLAUDE_SONNET_45 = "anthropic/claude-sonnet-4-5-20250929"

    # Local
    OLLAMA_LLAMA32 = "ollama/llama3.2"
