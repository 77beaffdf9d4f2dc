# src/scout/ranking/base.py
"""Ranker abstract base class."""

from abc import ABC, abstractmethod

from scout.models import ProjectSummary, ScoredProject

DEFAULT_TOP_N = 3


class Ranker(ABC):
    """Abstract base class for ranking strategies.

    Two capabilities describe how a ranker may be composed:

    - ``is_available``: the ranker can be attempted at all (e.g. it has a
      configured client). Unavailable rankers are skipped.
    - ``always_succeeds``: the ranker never raises and is safe to use as the
      final fallback.
    """

    always_succeeds: bool = False

    def __init__(self, top_n: int = DEFAULT_TOP_N) -> None:
        self.top_n = top_n

    @property
    def is_available(self) -> bool:
        return True

    @abstractmethod
    def rank(self, problem: str, corpus: list[ProjectSummary]) -> list[ScoredProject]:
        """Rank corpus projects against a problem statement, best first."""
        ...

    async def arank(self, problem: str, corpus: list[ProjectSummary]) -> list[ScoredProject]:
        """Rank corpus projects (async).

        Default implementation calls sync rank(). Override in subclasses for
        true async behavior.
        """
        return self.rank(problem, corpus)
