"""Async HTTP client for the product catalog API."""

from __future__ import annotations

import logging
from typing import Any, Sequence
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from shopassist.catalog.models import Product
from shopassist.catalog.provider import matches_query
from shopassist.config.settings import Settings, get_settings
from shopassist.metrics.prometheus_exporter import (
    catalog_fetch_failures_total,
    catalog_invalid_records_total,
)

logger = logging.getLogger(__name__)

_CATEGORY_LIST = TypeAdapter(list[str])


class CatalogRequestError(RuntimeError):
    """Raised internally when the catalog responds with an unusable payload."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class CatalogClient:
    """Thin wrapper over the FakeStore-compatible catalog endpoints.

    Every public lookup swallows transport and payload errors, logs them and
    returns an empty result so that callers never have to handle provider
    failures.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = settings or get_settings()
        self._settings = settings
        self._client = httpx.AsyncClient(
            base_url=settings.catalog_base_url.rstrip("/"),
            timeout=settings.catalog_timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""

        await self._client.aclose()

    async def _get_json(self, endpoint: str) -> Any:
        try:
            response = await self._client.get(endpoint)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise CatalogRequestError(
                f"Catalog returned {exc.response.status_code} for {endpoint}",
                status_code=exc.response.status_code,
            ) from exc
        if not response.content:
            return None
        return response.json()

    async def list_all_products(self) -> list[Product]:
        """Return every product or an empty list on failure."""

        try:
            return self._parse_products(await self._get_json("/products"), "list_all_products")
        except (httpx.HTTPError, CatalogRequestError, ValidationError, ValueError) as exc:
            self._record_failure("list_all_products", exc)
            return []

    async def get_product(self, product_id: int) -> Product | None:
        """Return a single product, or ``None`` when missing or unreachable."""

        try:
            payload = await self._get_json(f"/products/{product_id}")
            if not payload:
                return None
            return Product.model_validate(payload)
        except (httpx.HTTPError, CatalogRequestError, ValidationError, ValueError) as exc:
            self._record_failure("get_product", exc)
            return None

    async def list_by_category(self, category: str) -> list[Product]:
        """Return products of ``category`` in provider order."""

        try:
            payload = await self._get_json(f"/products/category/{quote(category, safe='')}")
            return self._parse_products(payload, "list_by_category")
        except (httpx.HTTPError, CatalogRequestError, ValidationError, ValueError) as exc:
            self._record_failure("list_by_category", exc)
            return []

    async def list_categories(self) -> list[str]:
        """Return category names known to the provider."""

        try:
            return _CATEGORY_LIST.validate_python(await self._get_json("/products/categories") or [])
        except (httpx.HTTPError, CatalogRequestError, ValidationError, ValueError) as exc:
            self._record_failure("list_categories", exc)
            return []

    async def search(
        self,
        query: str,
        products: Sequence[Product] | None = None,
    ) -> list[Product]:
        """Filter ``products`` (or the full catalog) by a substring query."""

        candidates = products if products is not None else await self.list_all_products()
        return [product for product in candidates if matches_query(product, query)]

    async def ping(self) -> bool:
        """Return ``True`` if the catalog answers the categories endpoint."""

        response = await self._client.get("/products/categories")
        return response.is_success

    def _parse_products(self, payload: Any, operation: str) -> list[Product]:
        """Validate records one by one, skipping those that do not fit the model."""

        if payload is None:
            return []
        if not isinstance(payload, list):
            raise CatalogRequestError(f"Expected a product list, got {type(payload).__name__}")

        products: list[Product] = []
        for index, record in enumerate(payload):
            try:
                products.append(Product.model_validate(record))
            except ValidationError as exc:
                catalog_invalid_records_total.labels(operation=operation).inc()
                logger.warning("Skipping invalid product record #%d from %s: %s", index, operation, exc)
        return products

    def _record_failure(self, operation: str, exc: Exception) -> None:
        catalog_fetch_failures_total.labels(operation=operation).inc()
        logger.error("Catalog %s failed: %s", operation, exc)
