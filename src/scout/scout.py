# src/scout/scout.py
"""Central configuration class for Project Scout."""

from __future__ import annotations

from typing import TYPE_CHECKING

from scout.settings import Settings

if TYPE_CHECKING:
    from scout.chat import ChatSession, MessageCallback
    from scout.models import SearchResult
    from scout.providers import LLMClient
    from scout.ranking import AIRecommender
    from scout.search import SolutionSearch
    from scout.stores import ProjectStore


class Scout:
    """Bundles a project store, an optional LLM client and settings.

    Configure once, then create searchers and chat sessions from it.

    Example:
        from scout import Scout
        from scout.providers.litellm import LiteLLMClient
        from scout.stores import SQLiteProjectStore

        scout = Scout(
            store=SQLiteProjectStore("./scout_data/projects.db"),
            llm_client=LiteLLMClient(api_key=os.environ["GEMINI_API_KEY"]),
        )
        result = scout.search("I need a dashboard for react")

    Without an llm_client every search uses keyword ranking.
    """

    def __init__(
        self,
        *,
        store: ProjectStore,
        llm_client: LLMClient | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Create a Scout instance.

        Args:
            store: Project store holding the corpus.
            llm_client: LLM client for AI recommendations. None disables the AI path.
            settings: Behavioral settings (top_n, use_ai, ai_timeout, etc.)
        """
        self.store = store
        self._llm_client = llm_client
        self._settings = settings if settings is not None else Settings()

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def ai_enabled(self) -> bool:
        """True when searches will attempt the AI recommender first."""
        return self._settings.use_ai and self._llm_client is not None

    def recommender(self) -> AIRecommender:
        """Create an AIRecommender from this instance's client and settings."""
        from scout.ranking import AIRecommender

        return AIRecommender(
            llm_client=self._llm_client if self._settings.use_ai else None,
            top_n=self._settings.top_n,
            prompt_template=self._settings.recommend_prompt,
            temperature=self._settings.ai_temperature,
            timeout=self._settings.ai_timeout,
        )

    def searcher(self) -> SolutionSearch:
        """Create a SolutionSearch over this instance's store."""
        from scout.ranking import KeywordRanker
        from scout.search import SolutionSearch

        return SolutionSearch(
            store=self.store,
            recommender=self.recommender(),
            fallback=KeywordRanker(top_n=self._settings.top_n),
        )

    def search(self, problem: str) -> SearchResult:
        """Find projects that solve a problem (blocking)."""
        return self.searcher().search(problem)

    async def asearch(self, problem: str) -> SearchResult:
        """Find projects that solve a problem (async)."""
        return await self.searcher().asearch(problem)

    def chat(self, on_message: MessageCallback | None = None) -> ChatSession:
        """Start a chat session backed by this instance's searcher."""
        from scout.chat import ChatSession

        return ChatSession(self.searcher().asearch, on_message=on_message)
