"""Recommendation engine and response formatting."""

from .engine import MAX_SUGGESTIONS, RecommendationEngine
from .formatter import ResponseFormatter
from .models import AssistantReply, AssistantResponse, Suggestion

__all__ = [
    "MAX_SUGGESTIONS",
    "AssistantReply",
    "AssistantResponse",
    "RecommendationEngine",
    "ResponseFormatter",
    "Suggestion",
]
