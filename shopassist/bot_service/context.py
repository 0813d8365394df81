"""Shared dependencies passed into handler setup functions."""

from __future__ import annotations

from dataclasses import dataclass

from shopassist.catalog.provider import CatalogProvider
from shopassist.services.assistant import AssistantSession
from shopassist.services.cart import CartRegistry, CartService


@dataclass(slots=True)
class BotContext:
    """Container for objects shared across handlers."""

    session: AssistantSession
    carts: CartRegistry
    cart_service: CartService
    catalog: CatalogProvider
