"""Chat orchestration: classify, extract, recommend, format."""

from __future__ import annotations

import asyncio
import logging
import random

from shopassist.catalog.models import Product
from shopassist.catalog.provider import CatalogProvider
from shopassist.metrics.prometheus_exporter import assistant_messages_total, catalog_snapshot_size
from shopassist.nlp.extractor import QueryExtractor
from shopassist.nlp.intent import Intent, IntentClassifier, normalize_message
from shopassist.recommender.engine import RecommendationEngine
from shopassist.recommender.formatter import ResponseFormatter, format_number
from shopassist.recommender.models import AssistantReply
from shopassist.services.stages import SessionState

logger = logging.getLogger(__name__)

APOLOGY_REPLY = (
    "I apologize, but I'm having trouble processing your request right now. "
    "Please try again, and I'll do my best to help you find great products!"
)


class AssistantSession:
    """Owns the catalog snapshot and answers chat messages against it.

    The session starts ``UNINITIALIZED`` and becomes ``READY`` after the first
    catalog fetch, whether that fetch produced products or not. Messages are
    expected to be processed one at a time.
    """

    def __init__(
        self,
        catalog: CatalogProvider,
        *,
        rng: random.Random | None = None,
        classifier: IntentClassifier | None = None,
        extractor: QueryExtractor | None = None,
    ) -> None:
        self._catalog = catalog
        self._classifier = classifier or IntentClassifier()
        self._extractor = extractor or QueryExtractor()
        self._engine = RecommendationEngine(catalog)
        self._formatter = ResponseFormatter(rng)
        self._state = SessionState.UNINITIALIZED
        self._products: tuple[Product, ...] = ()
        self._categories: tuple[str, ...] = ()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    @property
    def categories(self) -> tuple[str, ...]:
        return self._categories

    async def initialize(self) -> None:
        """Fetch products and categories, replacing the current snapshot."""

        try:
            products, categories = await asyncio.gather(
                self._catalog.list_all_products(),
                self._catalog.list_categories(),
            )
        except Exception:
            logger.exception("Failed to initialize assistant catalog")
            products, categories = [], []

        self._products = tuple(products)
        self._categories = tuple(categories)
        self._state = SessionState.READY
        catalog_snapshot_size.set(len(self._products))
        logger.info(
            "Catalog snapshot loaded: %d products, %d categories",
            len(self._products),
            len(self._categories),
        )

    async def ensure_ready(self) -> None:
        """Fetch the catalog unless a non-empty snapshot is already loaded."""

        if self._state is SessionState.UNINITIALIZED or not self._products:
            await self.initialize()

    async def process_message(self, message: str) -> AssistantReply:
        """Answer one chat message with a reply sentence and suggestions."""

        await self.ensure_ready()

        normalized = normalize_message(message)
        intent = self._classifier.classify(normalized)
        assistant_messages_total.labels(intent=intent.value).inc()
        logger.debug("Message %r classified as %s", normalized, intent.value)

        snapshot = self._products
        formatter = self._formatter

        if intent is Intent.GREETING:
            reply = formatter.greeting_reply()
            suggestions = formatter.format_suggestions(self._engine.popular(snapshot), "popular items")
        elif intent is Intent.SEARCH:
            query = self._extractor.extract_search_query(normalized)
            reply = formatter.search_reply(query)
            products = await self._engine.search(snapshot, query)
            suggestions = formatter.format_suggestions(products, query)
        elif intent is Intent.CATEGORY:
            category = self._extractor.extract_category(normalized)
            reply = formatter.category_reply(category)
            products = await self._engine.by_category(snapshot, category)
            suggestions = formatter.format_suggestions(products, f"{category} products")
        elif intent is Intent.HELP:
            reply = formatter.help_reply()
            suggestions = formatter.format_suggestions(self._engine.popular(snapshot), "popular items")
        elif intent is Intent.PRICE_INQUIRY:
            price_range = self._extractor.extract_price_range(normalized)
            reply = formatter.price_reply()
            products = self._engine.by_price_range(snapshot, price_range)
            suggestions = formatter.format_suggestions(
                products, f"products under ${format_number(price_range.max)}"
            )
        else:
            reply = formatter.default_reply()
            products, context = await self._engine.relevant(snapshot, normalized)
            suggestions = formatter.format_suggestions(products, context)

        return AssistantReply(reply=reply, intent=intent, suggestions=suggestions)
