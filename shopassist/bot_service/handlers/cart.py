"""Cart and checkout commands."""

from __future__ import annotations

import html

from aiogram import Router
from aiogram.filters import Command, CommandObject
from aiogram.types import Message

from shopassist.bot_service.context import BotContext
from shopassist.services.cart import Cart, CheckoutSummary, EmptyCartError


def render_cart(cart: Cart) -> str:
    if not cart.items:
        return "Your cart is empty. Ask me for recommendations to get started!"

    lines = [
        f"{html.escape(item.product.title)} x{item.quantity}: ${item.line_total:.2f}"
        for item in cart.items
    ]
    lines.append(f"\n<b>Items:</b> {cart.total_items}")
    lines.append(f"<b>Subtotal:</b> ${cart.subtotal:.2f}")
    lines.append("Send /checkout to place the order.")
    return "\n".join(lines)


def render_checkout(summary: CheckoutSummary, confirmation: str) -> str:
    return (
        f"Subtotal: ${summary.subtotal:.2f}\n"
        f"Tax: ${summary.tax:.2f}\n"
        f"Shipping: ${summary.shipping:.2f}\n"
        f"<b>Total: ${summary.total:.2f}</b>\n\n"
        f"{html.escape(confirmation)}"
    )


def setup(router: Router, context: BotContext) -> None:
    """Register /add, /cart and /checkout handlers."""

    @router.message(Command("add"))
    async def handle_add(message: Message, command: CommandObject) -> None:
        product_id = (command.args or "").strip()
        if not product_id:
            await message.answer("Usage: /add &lt;product id&gt;")
            return

        cart = context.carts.get(str(message.from_user.id))
        confirmation = await context.cart_service.add_to_cart(cart, product_id)
        if confirmation is None:
            await message.answer("Sorry, I couldn't find that product.")
            return
        await message.answer(html.escape(confirmation))

    @router.message(Command("cart"))
    async def handle_cart(message: Message) -> None:
        cart = context.carts.get(str(message.from_user.id))
        await message.answer(render_cart(cart))

    @router.message(Command("checkout"))
    async def handle_checkout(message: Message) -> None:
        cart = context.carts.get(str(message.from_user.id))
        try:
            summary, confirmation = context.cart_service.checkout(cart)
        except EmptyCartError:
            await message.answer("Your cart is empty, there is nothing to check out yet.")
            return
        await message.answer(render_checkout(summary, confirmation))
