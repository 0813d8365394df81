"""Shared fixtures: a small in-memory catalog."""

from __future__ import annotations

import random
from typing import Sequence

import pytest

from shopassist.catalog.models import Product, Rating
from shopassist.catalog.provider import matches_query


def make_product(
    product_id: int,
    title: str,
    price: float,
    category: str,
    rate: float,
    count: int,
    description: str = "",
) -> Product:
    return Product(
        id=product_id,
        title=title,
        price=price,
        description=description or f"Quality {title.lower()} for everyday use.",
        category=category,
        image=f"https://img.example/{product_id}.jpg",
        rating=Rating(rate=rate, count=count),
    )


PRODUCTS = [
    make_product(1, "Fjallraven Backpack", 109.95, "men's clothing", 3.9, 120),
    make_product(2, "Mens Casual T-Shirt", 22.3, "men's clothing", 4.1, 259),
    make_product(3, "Gold Dragon Bracelet", 695, "jewelery", 4.6, 400),
    make_product(4, "Silver Ring", 10.99, "jewelery", 3.0, 70),
    make_product(5, "WD 2TB External Hard Drive", 64, "electronics", 3.3, 203),
    make_product(6, "Rain Jacket Women", 39.99, "women's clothing", 3.8, 679),
    make_product(7, "Samsung 49-Inch Monitor", 999.99, "electronics", 2.2, 140),
]


class FakeCatalog:
    """In-memory catalog provider that records the calls it receives."""

    def __init__(self, products: Sequence[Product] = ()) -> None:
        self.products = list(products)
        self.calls: list[str] = []

    async def list_all_products(self) -> list[Product]:
        self.calls.append("list_all_products")
        return list(self.products)

    async def get_product(self, product_id: int) -> Product | None:
        self.calls.append("get_product")
        return next((p for p in self.products if p.id == product_id), None)

    async def list_by_category(self, category: str) -> list[Product]:
        self.calls.append("list_by_category")
        return [p for p in self.products if p.category == category]

    async def list_categories(self) -> list[str]:
        self.calls.append("list_categories")
        return sorted({p.category for p in self.products})

    async def search(self, query: str, products: Sequence[Product] | None = None) -> list[Product]:
        self.calls.append("search")
        candidates = products if products is not None else self.products
        return [p for p in candidates if matches_query(p, query)]


@pytest.fixture
def products() -> list[Product]:
    return list(PRODUCTS)


@pytest.fixture
def catalog() -> FakeCatalog:
    return FakeCatalog(PRODUCTS)


@pytest.fixture
def empty_catalog() -> FakeCatalog:
    return FakeCatalog()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(42)
