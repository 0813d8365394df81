"""Catalog data source."""

from .client import CatalogClient
from .models import Product, Rating
from .provider import CatalogProvider

__all__ = [
    "CatalogClient",
    "CatalogProvider",
    "Product",
    "Rating",
]
