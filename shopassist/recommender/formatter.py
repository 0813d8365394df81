"""Turns ranked products into chat replies and suggestion cards."""

from __future__ import annotations

import logging
import random
from typing import Sequence

from shopassist.catalog.models import Product
from shopassist.recommender.models import AssistantResponse, Suggestion

logger = logging.getLogger(__name__)

SOURCE_LABEL = "FakeStore"
DESCRIPTION_LIMIT = 100

HIGH_CONFIDENCE = 0.9
LOW_CONFIDENCE = 0.3

RESULT_ACTIONS = (
    "Add to cart",
    "View more details",
    "Compare similar products",
    "Ask about other categories",
)
NO_RESULT_ACTIONS = (
    "Try a different search term",
    "Browse categories",
    "Ask for help finding specific items",
)

GREETINGS = (
    "Hello! I'm your personal shopping assistant. I'm here to help you find amazing "
    "products with great reviews and excellent value!",
    "Hi there! Welcome to your personalized shopping experience. I can help you discover "
    "the best products that match your needs and budget!",
    "Good day! I'm excited to help you find the perfect products today. Let me show you "
    "some popular items that customers absolutely love!",
)

WELCOME_MESSAGE = (
    "Hello! I'm your personal shopping assistant. I'm here to help you find amazing "
    "products with great reviews and excellent value! What can I help you find today?"
)

HELP_MESSAGE = (
    "I'm here to make your shopping experience amazing! I can help you:\n\n"
    "• Find products by describing what you need\n"
    "• Browse different categories\n"
    "• Get recommendations based on customer reviews\n"
    "• Find products within your budget\n"
    "• Guide you through checkout\n\n"
    "Just tell me what you're looking for, and I'll show you the best options!"
)

DEFAULT_MESSAGE = (
    "I understand you're interested in shopping! Let me show you some highly-rated "
    "products that might interest you. These items have excellent customer reviews "
    "and great value:"
)

PRICE_MESSAGE = (
    "I found some amazing products within your budget. These are highly rated by customers:"
)


def format_number(value: float) -> str:
    """Render a number without a trailing ``.0`` for whole values."""

    if float(value).is_integer():
        return str(int(value))
    return str(value)


def truncate_description(description: str, limit: int = DESCRIPTION_LIMIT) -> str:
    if len(description) > limit:
        return description[:limit] + "..."
    return description


def pick_greeting(rng: random.Random) -> str:
    return rng.choice(GREETINGS)


def pick_reason(product: Product, rng: random.Random) -> str:
    """Choose one of the recommendation rationales for ``product``."""

    reasons = (
        f"⭐ {format_number(product.rating.rate)}/5 rating with "
        f"{product.rating.count} customer reviews",
        f"💰 Great value at ${format_number(product.price)} with excellent customer satisfaction",
        f"🏆 Top-rated in {product.category} category",
        f"👥 Popular choice with {product.rating.count}+ happy customers",
        "✨ Highly recommended based on customer reviews",
    )
    return rng.choice(reasons)


def next_actions(has_results: bool) -> list[str]:
    return list(RESULT_ACTIONS if has_results else NO_RESULT_ACTIONS)


class ResponseFormatter:
    """Builds :class:`AssistantResponse` objects and reply sentences.

    Randomised phrasing is drawn from the injected ``rng`` so that tests can
    seed it; ranking is never affected.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def format_suggestions(self, products: Sequence[Product], context: str) -> AssistantResponse:
        suggestions = [self._to_suggestion(product) for product in products]
        logger.debug("Formatted %d suggestions for %r", len(suggestions), context)
        has_results = bool(suggestions)
        return AssistantResponse(
            suggestions=suggestions,
            next_actions=next_actions(has_results),
            confidence=HIGH_CONFIDENCE if has_results else LOW_CONFIDENCE,
        )

    def _to_suggestion(self, product: Product) -> Suggestion:
        return Suggestion(
            id=str(product.id),
            title=product.title,
            short_description=truncate_description(product.description),
            price=round(product.price, 2),
            image=product.image,
            source=SOURCE_LABEL,
            reason=pick_reason(product, self._rng),
        )

    def greeting_reply(self) -> str:
        return pick_greeting(self._rng)

    def help_reply(self) -> str:
        return HELP_MESSAGE

    def search_reply(self, query: str) -> str:
        return f'I found some great products for "{query}". Here are my top recommendations:'

    def category_reply(self, category: str) -> str:
        return f"Here are some excellent {category} products that customers love:"

    def price_reply(self) -> str:
        return PRICE_MESSAGE

    def default_reply(self) -> str:
        return DEFAULT_MESSAGE
