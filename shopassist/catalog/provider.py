"""Read-only catalog provider contract."""

from __future__ import annotations

from typing import Protocol, Sequence

from shopassist.catalog.models import Product


class CatalogProvider(Protocol):
    """Data source consumed by the assistant.

    Implementations absorb transport failures: list operations return an
    empty list and single lookups return ``None`` instead of raising.
    """

    async def list_all_products(self) -> list[Product]: ...

    async def get_product(self, product_id: int) -> Product | None: ...

    async def list_by_category(self, category: str) -> list[Product]: ...

    async def list_categories(self) -> list[str]: ...

    async def search(
        self,
        query: str,
        products: Sequence[Product] | None = None,
    ) -> list[Product]: ...


def matches_query(product: Product, query: str) -> bool:
    """Case-insensitive substring match over title, description and category."""

    term = query.lower()
    return (
        term in product.title.lower()
        or term in product.description.lower()
        or term in product.category.lower()
    )
