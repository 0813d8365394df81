"""Selection and ranking of catalog products."""

from __future__ import annotations

from typing import Sequence

from shopassist.catalog.models import Product
from shopassist.catalog.provider import CatalogProvider
from shopassist.nlp.extractor import PriceRange

MAX_SUGGESTIONS = 3


class RecommendationEngine:
    """Picks at most :data:`MAX_SUGGESTIONS` products per strategy.

    Every strategy works on the snapshot handed in by the caller and returns
    an empty list for an empty snapshot.
    """

    def __init__(self, catalog: CatalogProvider, limit: int = MAX_SUGGESTIONS) -> None:
        self._catalog = catalog
        self._limit = limit

    def popular(self, snapshot: Sequence[Product]) -> list[Product]:
        """Rank by ``rate * count``; the snapshot itself is left untouched."""

        ranked = sorted(snapshot, key=lambda product: product.popularity, reverse=True)
        return ranked[: self._limit]

    async def search(self, snapshot: Sequence[Product], query: str) -> list[Product]:
        """Substring matches in catalog order."""

        matches = await self._catalog.search(query, list(snapshot))
        return matches[: self._limit]

    async def by_category(self, snapshot: Sequence[Product], category: str) -> list[Product]:
        if not snapshot:
            return []
        products = await self._catalog.list_by_category(category)
        return products[: self._limit]

    def by_price_range(self, snapshot: Sequence[Product], price_range: PriceRange) -> list[Product]:
        in_range = [product for product in snapshot if product.price in price_range]
        in_range.sort(key=lambda product: product.rating.rate, reverse=True)
        return in_range[: self._limit]

    async def relevant(self, snapshot: Sequence[Product], message: str) -> tuple[list[Product], str]:
        """Search with the whole message, falling back to popular products.

        Returns the products together with the context label describing them.
        """

        matches = await self.search(snapshot, message)
        if matches:
            return matches, message
        return self.popular(snapshot), "popular items"
