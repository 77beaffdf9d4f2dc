# src/scout/models/chat.py
"""Chat transcript data model."""

from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, Field

from scout.models.results import ScoredProject

Sender = Literal["user", "bot"]


class ChatMessage(BaseModel):
    """One entry in a chat transcript."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    sender: Sender
    text: str
    projects: list[ScoredProject] | None = None
