"""Structures returned to the presentation layer."""

from __future__ import annotations

from pydantic import BaseModel, Field

from shopassist.nlp.intent import Intent


class Suggestion(BaseModel):
    """Display-ready projection of a catalog product."""

    id: str
    title: str
    short_description: str
    price: float
    image: str
    source: str
    reason: str


class AssistantResponse(BaseModel):
    """Recommendation cards together with follow-up hints."""

    suggestions: list[Suggestion] = Field(default_factory=list)
    next_actions: list[str] = Field(default_factory=list)
    confidence: float = Field(ge=0, le=1)


class AssistantReply(BaseModel):
    """Full answer to a single chat message."""

    reply: str
    intent: Intent
    suggestions: AssistantResponse
