"""Request and response bodies of the HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from shopassist.catalog.models import Product
from shopassist.services.cart import Cart, CheckoutSummary


class ChatRequest(BaseModel):
    message: str


class AddToCartRequest(BaseModel):
    product_id: str


class UpdateQuantityRequest(BaseModel):
    quantity: int


class CartLine(BaseModel):
    product: Product
    quantity: int


class CartView(BaseModel):
    items: list[CartLine] = Field(default_factory=list)
    total_items: int = 0
    subtotal: float = 0.0

    @classmethod
    def from_cart(cls, cart: Cart) -> "CartView":
        return cls(
            items=[CartLine(product=item.product, quantity=item.quantity) for item in cart.items],
            total_items=cart.total_items,
            subtotal=round(cart.subtotal, 2),
        )


class CartMessage(BaseModel):
    message: str
    cart: CartView


class CheckoutResponse(BaseModel):
    message: str
    subtotal: float
    tax: float
    shipping: float
    total: float

    @classmethod
    def from_summary(cls, summary: CheckoutSummary, message: str) -> "CheckoutResponse":
        return cls(
            message=message,
            subtotal=summary.subtotal,
            tax=summary.tax,
            shipping=summary.shipping,
            total=summary.total,
        )


class RefreshResponse(BaseModel):
    products: int
    categories: int
