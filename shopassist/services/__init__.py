"""Application services."""

from .assistant import APOLOGY_REPLY, AssistantSession
from .cart import Cart, CartError, CartRegistry, CartService, EmptyCartError, UnknownCartItemError
from .stages import SessionState

__all__ = [
    "APOLOGY_REPLY",
    "AssistantSession",
    "Cart",
    "CartError",
    "CartRegistry",
    "CartService",
    "EmptyCartError",
    "SessionState",
    "UnknownCartItemError",
]
