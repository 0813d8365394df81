"""Keyword-based intent detection."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, Sequence


class Intent(str, Enum):
    """Coarse categories a chat message can be assigned to."""

    GREETING = "greeting"
    SEARCH = "search"
    CATEGORY = "category"
    HELP = "help"
    PRICE_INQUIRY = "price_inquiry"
    GENERAL = "general"


IntentRule = tuple[Callable[[str], bool], Intent]


def contains_any(patterns: Iterable[str]) -> Callable[[str], bool]:
    """Build a predicate that matches when any literal pattern is a substring."""

    frozen = tuple(patterns)

    def _predicate(message: str) -> bool:
        return any(pattern in message for pattern in frozen)

    return _predicate


GREETING_PATTERNS = ("hello", "hi", "hey", "good morning", "good afternoon", "good evening")
SEARCH_PATTERNS = ("looking for", "need", "want to buy", "show me", "find")
CATEGORY_PATTERNS = ("electronics", "clothing", "jewelry", "men", "women")
HELP_PATTERNS = ("help", "assist", "guide", "how", "what can you do")
PRICE_PATTERNS = ("cheap", "expensive", "under", "budget", "price", "cost", "$")

# Evaluated top to bottom; the first match wins, so "hi, show me men's
# electronics" is a greeting.
DEFAULT_RULES: tuple[IntentRule, ...] = (
    (contains_any(GREETING_PATTERNS), Intent.GREETING),
    (contains_any(SEARCH_PATTERNS), Intent.SEARCH),
    (contains_any(CATEGORY_PATTERNS), Intent.CATEGORY),
    (contains_any(HELP_PATTERNS), Intent.HELP),
    (contains_any(PRICE_PATTERNS), Intent.PRICE_INQUIRY),
)


def normalize_message(message: str) -> str:
    """Lower-case and trim a raw chat message."""

    return message.lower().strip()


class IntentClassifier:
    """Ordered substring classifier; falls back to ``Intent.GENERAL``."""

    def __init__(self, rules: Sequence[IntentRule] | None = None) -> None:
        self._rules = tuple(rules) if rules is not None else DEFAULT_RULES

    def classify(self, message: str) -> Intent:
        """Return the intent of an already normalised message."""

        for predicate, intent in self._rules:
            if predicate(message):
                return intent
        return Intent.GENERAL
