"""Catalog payload models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Rating(BaseModel):
    """Aggregated customer rating of a product."""

    rate: float = Field(ge=0, le=5)
    count: int = Field(ge=0)


class Product(BaseModel):
    """Product record as served by the catalog provider."""

    id: int
    title: str
    price: float
    description: str
    category: str
    image: str
    rating: Rating

    @property
    def popularity(self) -> float:
        """Rating weighted by the number of reviews."""

        return self.rating.rate * self.rating.count
