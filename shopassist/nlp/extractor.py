"""Parameter extraction for classified messages."""

from __future__ import annotations

import re
from dataclasses import dataclass

STOP_WORDS = frozenset({"i", "am", "looking", "for", "need", "want", "to", "buy", "show", "me", "find"})
FALLBACK_QUERY = "popular items"

DEFAULT_CATEGORY = "electronics"
# Insertion order matters: "women" also contains "men", which is checked first.
CATEGORY_ALIASES: dict[str, str] = {
    "electronics": "electronics",
    "clothes": "men's clothing",
    "clothing": "men's clothing",
    "jewelry": "jewelery",
    "men": "men's clothing",
    "women": "women's clothing",
}

_UNDER_AMOUNT = re.compile(r"under\s*\$?(\d+)")


@dataclass(frozen=True, slots=True)
class PriceRange:
    """Inclusive price bounds."""

    min: float
    max: float

    def __contains__(self, price: float) -> bool:
        return self.min <= price <= self.max


BUDGET_RANGE = PriceRange(0, 50)
PREMIUM_RANGE = PriceRange(100, 1000)
DEFAULT_RANGE = PriceRange(0, 100)


class QueryExtractor:
    """Derives search terms, category names and price bounds from a message."""

    def extract_search_query(self, message: str) -> str:
        words = [
            word
            for word in message.split()
            if len(word) > 2 and word.lower() not in STOP_WORDS
        ]
        return " ".join(words) or FALLBACK_QUERY

    def extract_category(self, message: str) -> str:
        for alias, category in CATEGORY_ALIASES.items():
            if alias in message:
                return category
        return DEFAULT_CATEGORY

    def extract_price_range(self, message: str) -> PriceRange:
        """Map budget wording to a price range; unparseable input gets the default."""

        if "cheap" in message or "budget" in message:
            return BUDGET_RANGE
        if "expensive" in message or "premium" in message:
            return PREMIUM_RANGE
        if "under" in message:
            match = _UNDER_AMOUNT.search(message)
            if match:
                return PriceRange(0, int(match.group(1)))
        return DEFAULT_RANGE
