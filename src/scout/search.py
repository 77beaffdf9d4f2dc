# src/scout/search.py
"""Solution search pipeline for Project Scout."""

import asyncio
import logging

from scout.models import ProjectSummary, ScoredProject, SearchResult
from scout.ranking import KeywordRanker, Ranker
from scout.stores import ProjectStore

logger = logging.getLogger(__name__)

CORPUS_LOAD_ERROR = "Failed to fetch projects"
SEARCH_ERROR = "Failed to find solutions"


class SolutionSearch:
    """Matches a problem statement against the approved projects.

    Each call is one pass: load the approved corpus, try the primary ranker
    (the AI recommender) if it is available, and fall back to the keyword
    ranker when the primary is skipped, fails or finds nothing. No state is
    kept between calls, so one instance can serve concurrent searches.

    Example:
        searcher = SolutionSearch(
            store=SQLiteProjectStore("./scout_data/projects.db"),
            recommender=AIRecommender(llm_client=client),
        )
        result = await searcher.asearch("I need to track inventory")
    """

    def __init__(
        self,
        store: ProjectStore,
        recommender: Ranker | None = None,
        fallback: Ranker | None = None,
    ) -> None:
        """Initialize the search pipeline.

        Args:
            store: Project store to read approved projects from
            recommender: Primary ranker (optional). Typically an AIRecommender.
            fallback: Ranker that must always succeed. Defaults to KeywordRanker().

        Raises:
            ValueError: If the fallback ranker can fail.
        """
        fallback = fallback or KeywordRanker()
        if not fallback.always_succeeds:
            raise ValueError(f"{type(fallback).__name__} cannot be used as a fallback ranker")
        self.store = store
        self.recommender = recommender
        self.fallback = fallback

    def _should_try_primary(self) -> bool:
        if self.recommender is None:
            return False
        if not self.recommender.is_available:
            logger.debug("Recommender not configured, using keyword ranking")
            return False
        return True

    def _finish(self, problem: str, results: list[ScoredProject], source: str) -> SearchResult:
        logger.info("Found %d solutions for %r via %s", len(results), problem, source)
        return SearchResult(success=True, data=results)

    def search(self, problem: str) -> SearchResult:
        """Find projects that solve a problem (blocking).

        Args:
            problem: Free-text problem statement

        Returns:
            SearchResult with at most ``top_n`` projects, best first
        """
        if not problem.strip():
            return SearchResult(success=True, data=[])

        try:
            try:
                corpus = self.store.list_approved()
            except Exception:
                logger.exception("Failed to load approved projects")
                return SearchResult(success=False, error=CORPUS_LOAD_ERROR)

            if self._should_try_primary():
                assert self.recommender is not None
                try:
                    results = self.recommender.rank(problem, corpus)
                    if results:
                        return self._finish(problem, results, "recommender")
                except Exception as e:
                    logger.warning("Recommender failed, falling back to keywords: %s", e)

            return self._finish(problem, self.fallback.rank(problem, corpus), "keywords")
        except Exception:
            logger.exception("Solution search failed")
            return SearchResult(success=False, error=SEARCH_ERROR)

    async def asearch(self, problem: str) -> SearchResult:
        """Find projects that solve a problem (async).

        The corpus load runs in a worker thread; the recommender call and the
        fallback run strictly one after the other.
        """
        if not problem.strip():
            return SearchResult(success=True, data=[])

        try:
            try:
                corpus: list[ProjectSummary] = await asyncio.to_thread(self.store.list_approved)
            except Exception:
                logger.exception("Failed to load approved projects")
                return SearchResult(success=False, error=CORPUS_LOAD_ERROR)

            if self._should_try_primary():
                assert self.recommender is not None
                try:
                    results = await self.recommender.arank(problem, corpus)
                    if results:
                        return self._finish(problem, results, "recommender")
                except Exception as e:
                    logger.warning("Recommender failed, falling back to keywords: %s", e)

            return self._finish(problem, self.fallback.rank(problem, corpus), "keywords")
        except Exception:
            logger.exception("Solution search failed")
            return SearchResult(success=False, error=SEARCH_ERROR)

