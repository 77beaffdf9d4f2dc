# src/scout/ranking/exceptions.py
"""Exceptions for ranking."""

from typing import Literal

FailureReason = Literal["unavailable", "request", "timeout", "parse", "empty"]


class RecommendationError(Exception):
    """Raised when the AI recommender cannot produce a usable answer.

    Attributes:
        reason: Which stage failed. "empty" means the model answered but none
            of the returned IDs matched a corpus project.
        raw_response: The model's response text, when one was received.
    """

    def __init__(
        self,
        message: str,
        reason: FailureReason,
        raw_response: str | None = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.raw_response = raw_response
