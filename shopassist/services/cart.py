"""In-memory shopping cart and simulated checkout."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from shopassist.catalog.models import Product
from shopassist.catalog.provider import CatalogProvider
from shopassist.config.settings import Settings, get_settings
from shopassist.recommender.formatter import format_number

logger = logging.getLogger(__name__)

CHECKOUT_CONFIRMATION = (
    "🎉 Congratulations! Your order has been successfully placed. You'll receive a "
    "confirmation email shortly, and we'll keep you updated on your delivery status. "
    "Thank you for shopping with us! Is there anything else I can help you find today?"
)


class CartError(ValueError):
    """Raised when a cart operation receives invalid input."""


class UnknownCartItemError(CartError):
    """Raised when a product is not part of the cart."""


class EmptyCartError(CartError):
    """Raised when checking out a cart without items."""


@dataclass(slots=True)
class CartItem:
    """A cart line: product snapshot plus quantity."""

    product: Product
    quantity: int = 1

    @property
    def line_total(self) -> float:
        return self.product.price * self.quantity


@dataclass(slots=True)
class CheckoutSummary:
    """Totals shown on the checkout form."""

    subtotal: float
    tax: float
    shipping: float
    total: float


@dataclass(slots=True)
class Cart:
    """Ordered cart lines keyed by product id."""

    _items: dict[int, CartItem] = field(default_factory=dict)

    @property
    def items(self) -> list[CartItem]:
        return list(self._items.values())

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self._items.values())

    @property
    def subtotal(self) -> float:
        return sum(item.line_total for item in self._items.values())

    def add_product(self, product: Product) -> CartItem:
        item = self._items.get(product.id)
        if item is None:
            item = CartItem(product=product)
            self._items[product.id] = item
        else:
            item.quantity += 1
        return item

    def update_quantity(self, product_id: int, quantity: int) -> None:
        """Set a line quantity; zero removes the line."""

        if quantity < 0:
            raise CartError("Quantity cannot be negative.")
        if product_id not in self._items:
            raise UnknownCartItemError(f"Product {product_id} is not in the cart.")
        if quantity == 0:
            del self._items[product_id]
        else:
            self._items[product_id].quantity = quantity

    def remove_item(self, product_id: int) -> None:
        self._items.pop(product_id, None)

    def clear(self) -> None:
        self._items.clear()

    def checkout_summary(self, tax_rate: float, shipping_fee: float) -> CheckoutSummary:
        subtotal = self.subtotal
        tax = subtotal * tax_rate
        return CheckoutSummary(
            subtotal=round(subtotal, 2),
            tax=round(tax, 2),
            shipping=round(shipping_fee, 2),
            total=round(subtotal + tax + shipping_fee, 2),
        )


class CartRegistry:
    """Keeps one cart per owner (HTTP cart id or chat user id)."""

    def __init__(self) -> None:
        self._carts: dict[str, Cart] = {}

    def get(self, owner_id: str) -> Cart:
        if owner_id not in self._carts:
            self._carts[owner_id] = Cart()
        return self._carts[owner_id]


class CartService:
    """Cart operations that need the catalog or checkout settings."""

    def __init__(self, catalog: CatalogProvider, settings: Settings | None = None) -> None:
        self._catalog = catalog
        self._settings = settings or get_settings()

    async def add_to_cart(self, cart: Cart, product_id: str) -> str | None:
        """Add a product by its suggestion id and return the confirmation text.

        ``None`` means the product could not be found.
        """

        try:
            numeric_id = int(product_id)
        except (TypeError, ValueError):
            logger.warning("Ignoring non-numeric product id %r", product_id)
            return None

        product = await self._catalog.get_product(numeric_id)
        if product is None:
            return None

        cart.add_product(product)
        return (
            f'Great choice! I\'ve added "{product.title}" to your cart. This product has '
            f"excellent customer reviews ({format_number(product.rating.rate)}/5 stars) and is "
            "very popular with our shoppers. Would you like to continue shopping or proceed "
            "to checkout?"
        )

    def checkout(self, cart: Cart) -> tuple[CheckoutSummary, str]:
        """Simulate order placement: compute totals and empty the cart."""

        if not cart.items:
            raise EmptyCartError("The cart is empty.")
        summary = cart.checkout_summary(
            self._settings.checkout_tax_rate,
            self._settings.checkout_shipping_fee,
        )
        cart.clear()
        logger.info("Simulated checkout completed, total %.2f", summary.total)
        return summary, CHECKOUT_CONFIRMATION
