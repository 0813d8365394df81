"""FastAPI entrypoint and HTTP routes."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, HTTPException, Request, status
from prometheus_client import make_asgi_app

from shopassist.api.schemas import (
    AddToCartRequest,
    CartMessage,
    CartView,
    ChatRequest,
    CheckoutResponse,
    RefreshResponse,
    UpdateQuantityRequest,
)
from shopassist.catalog.client import CatalogClient
from shopassist.catalog.models import Product
from shopassist.catalog.provider import CatalogProvider
from shopassist.config.settings import get_settings
from shopassist.monitoring.logging import configure_logging
from shopassist.nlp.intent import Intent
from shopassist.recommender.formatter import LOW_CONFIDENCE, WELCOME_MESSAGE, next_actions
from shopassist.recommender.models import AssistantReply, AssistantResponse
from shopassist.services.assistant import APOLOGY_REPLY, AssistantSession
from shopassist.services.cart import (
    CartError,
    CartRegistry,
    CartService,
    EmptyCartError,
    UnknownCartItemError,
)

logger = logging.getLogger(__name__)


def create_app(catalog: CatalogProvider | None = None) -> FastAPI:
    """Initialise the FastAPI application.

    When ``catalog`` is omitted an HTTP catalog client is created on startup
    and closed on shutdown.
    """

    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging()
        owned_client = CatalogClient(settings) if catalog is None else None
        provider = catalog if catalog is not None else owned_client
        session = AssistantSession(provider)
        await session.initialize()

        app.state.catalog = provider
        app.state.session = session
        app.state.carts = CartRegistry()
        app.state.cart_service = CartService(provider, settings)
        try:
            yield
        finally:
            if owned_client is not None:
                await owned_client.close()

    app = FastAPI(
        title="Shopping Assistant API",
        version="0.1.0",
        docs_url="/docs" if settings.environment != "prod" else None,
        redoc_url="/redoc" if settings.environment != "prod" else None,
        lifespan=lifespan,
    )
    app.mount("/metrics", make_asgi_app())

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Simple health endpoint used for readiness checks."""

        return {"status": "ok"}

    @app.get("/welcome", tags=["chat"])
    async def welcome() -> dict[str, str]:
        return {"message": WELCOME_MESSAGE}

    @app.post("/chat", tags=["chat"], response_model=AssistantReply)
    async def chat(payload: ChatRequest, request: Request) -> AssistantReply:
        """Answer a chat message; unexpected failures become an apology."""

        session: AssistantSession = request.app.state.session
        try:
            return await session.process_message(payload.message)
        except Exception:
            logger.exception("Failed to process chat message")
            return AssistantReply(
                reply=APOLOGY_REPLY,
                intent=Intent.GENERAL,
                suggestions=AssistantResponse(
                    next_actions=next_actions(False),
                    confidence=LOW_CONFIDENCE,
                ),
            )

    @app.get("/products/{product_id}", tags=["catalog"], response_model=Product)
    async def get_product(product_id: int, request: Request) -> Product:
        product = await request.app.state.catalog.get_product(product_id)
        if product is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found.")
        return product

    @app.get("/categories", tags=["catalog"])
    async def list_categories(request: Request) -> list[str]:
        session: AssistantSession = request.app.state.session
        await session.ensure_ready()
        return list(session.categories)

    @app.post("/catalog/refresh", tags=["catalog"], response_model=RefreshResponse)
    async def refresh_catalog(request: Request) -> RefreshResponse:
        session: AssistantSession = request.app.state.session
        await session.initialize()
        return RefreshResponse(products=len(session.products), categories=len(session.categories))

    @app.get("/carts/{cart_id}", tags=["cart"], response_model=CartView)
    async def get_cart(cart_id: str, request: Request) -> CartView:
        return CartView.from_cart(request.app.state.carts.get(cart_id))

    @app.post("/carts/{cart_id}/items", tags=["cart"], response_model=CartMessage)
    async def add_to_cart(cart_id: str, payload: AddToCartRequest, request: Request) -> CartMessage:
        cart = request.app.state.carts.get(cart_id)
        service: CartService = request.app.state.cart_service
        message = await service.add_to_cart(cart, payload.product_id)
        if message is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found.")
        return CartMessage(message=message, cart=CartView.from_cart(cart))

    @app.patch("/carts/{cart_id}/items/{product_id}", tags=["cart"], response_model=CartView)
    async def update_quantity(
        cart_id: str,
        product_id: int,
        payload: UpdateQuantityRequest,
        request: Request,
    ) -> CartView:
        cart = request.app.state.carts.get(cart_id)
        try:
            cart.update_quantity(product_id, payload.quantity)
        except UnknownCartItemError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
        except CartError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
        return CartView.from_cart(cart)

    @app.delete("/carts/{cart_id}/items/{product_id}", tags=["cart"], response_model=CartView)
    async def remove_item(cart_id: str, product_id: int, request: Request) -> CartView:
        cart = request.app.state.carts.get(cart_id)
        cart.remove_item(product_id)
        return CartView.from_cart(cart)

    @app.post("/carts/{cart_id}/checkout", tags=["cart"], response_model=CheckoutResponse)
    async def checkout(cart_id: str, request: Request) -> CheckoutResponse:
        cart = request.app.state.carts.get(cart_id)
        service: CartService = request.app.state.cart_service
        try:
            summary, message = service.checkout(cart)
        except EmptyCartError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
        return CheckoutResponse.from_summary(summary, message)

    return app


app = create_app()
