# src/scout/ranking/keyword.py
"""Deterministic keyword ranker."""

from scout.models import ProjectSummary, ScoredProject
from scout.ranking.base import DEFAULT_TOP_N, Ranker

TITLE_WEIGHT = 10
DESCRIPTION_WEIGHT = 5
CATEGORY_WEIGHT = 8

# Tokens this short or shorter are dropped ("a", "to", "of", ...)
MIN_TOKEN_LENGTH = 3


def tokenize(problem: str) -> list[str]:
    """Lowercase and whitespace-split a problem, keeping tokens of 3+ characters."""
    return [t for t in problem.lower().split() if len(t) >= MIN_TOKEN_LENGTH]


def score_project(tokens: list[str], project: ProjectSummary) -> int:
    """Score one project by substring containment of each token.

    A token found inside a longer word still counts ("log" matches "catalog").
    """
    title = project.title.lower()
    description = project.description.lower()
    categories = [name.lower() for name in project.category_names]

    score = 0
    for token in tokens:
        if token in title:
            score += TITLE_WEIGHT
        if token in description:
            score += DESCRIPTION_WEIGHT
        if any(token in name for name in categories):
            score += CATEGORY_WEIGHT
    return score


class KeywordRanker(Ranker):
    """Ranks projects by weighted keyword matches in title, description and categories.

    Always succeeds, so it serves as the fallback behind the AI recommender.
    Ties keep corpus order: Python's sort is stable and no secondary key is used.

    Example:
        ranker = KeywordRanker()
        results = ranker.rank("inventory tracking", store.list_approved())
    """

    always_succeeds = True

    def __init__(self, top_n: int = DEFAULT_TOP_N) -> None:
        super().__init__(top_n=top_n)

    def rank(self, problem: str, corpus: list[ProjectSummary]) -> list[ScoredProject]:
        tokens = tokenize(problem)
        if not tokens or not corpus:
            return []

        scored = []
        for project in corpus:
            score = score_project(tokens, project)
            if score > 0:
                scored.append(
                    ScoredProject(
                        id=project.id,
                        title=project.title,
                        slug=project.slug,
                        description=project.description,
                        score=score,
                    )
                )

        scored.sort(key=lambda p: p.score, reverse=True)
        return scored[: self.top_n]
