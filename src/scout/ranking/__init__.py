"""Ranking strategies for matching problem statements to projects."""

from scout.ranking.ai import AI_SCORE, RECOMMEND_PROMPT, AIRecommender
from scout.ranking.base import Ranker
from scout.ranking.exceptions import RecommendationError
from scout.ranking.keyword import (
    CATEGORY_WEIGHT,
    DESCRIPTION_WEIGHT,
    TITLE_WEIGHT,
    KeywordRanker,
    tokenize,
)

__all__ = [
    "AI_SCORE",
    "CATEGORY_WEIGHT",
    "DESCRIPTION_WEIGHT",
    "RECOMMEND_PROMPT",
    "TITLE_WEIGHT",
    "AIRecommender",
    "KeywordRanker",
    "Ranker",
    "RecommendationError",
    "tokenize",
]
