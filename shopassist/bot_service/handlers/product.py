"""Product details command."""

from __future__ import annotations

import html

from aiogram import Router
from aiogram.filters import Command, CommandObject
from aiogram.types import Message

from shopassist.bot_service.context import BotContext
from shopassist.catalog.models import Product
from shopassist.recommender.formatter import format_number


def render_product(product: Product) -> str:
    """Full product card shown by /product."""

    return (
        f"<b>{html.escape(product.title)}</b>\n"
        f"${product.price:.2f} · {html.escape(product.category)}\n"
        f"⭐ {format_number(product.rating.rate)}/5 ({product.rating.count} reviews)\n\n"
        f"{html.escape(product.description)}\n\n"
        f"/add {product.id}"
    )


def setup(router: Router, context: BotContext) -> None:
    """Register the /product handler."""

    @router.message(Command("product"))
    async def handle_product(message: Message, command: CommandObject) -> None:
        raw_id = (command.args or "").strip()
        if not raw_id.isdigit():
            await message.answer("Usage: /product &lt;product id&gt;")
            return

        product = await context.catalog.get_product(int(raw_id))
        if product is None:
            await message.answer("Sorry, I couldn't find that product.")
            return
        await message.answer(render_product(product))
