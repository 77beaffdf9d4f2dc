# src/scout/settings.py
"""Behavioral settings for Project Scout.

Settings are passed programmatically; the library itself does not read
environment variables. ``scout.config`` builds Settings from scout.yaml and
SCOUT_* environment variables for the CLI and TUI.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from scout.providers.litellm.models import ChatModels


class Settings(BaseModel):
    """Behavioral settings for solution search.

    Example:
        settings = Settings(top_n=3, ai_timeout=5.0)

        # Keyword ranking only
        settings = Settings(use_ai=False)
    """

    # Ranking
    top_n: int = Field(default=3, ge=1, le=3)

    # AI recommender
    use_ai: bool = True
    llm_model: str = ChatModels.GEMINI_25_FLASH
    ai_timeout: float | None = Field(default=10.0, gt=0)
    ai_temperature: float | None = None
    recommend_prompt: str | None = None

    # Retry configuration (LiteLLM handles exponential backoff for RateLimitError)
    num_retries: int = 2
