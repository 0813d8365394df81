"""Register message and command handlers."""

from __future__ import annotations

from aiogram import Router

from shopassist.bot_service.context import BotContext

from . import cart, chat, product, start


def setup_handlers(router: Router, context: BotContext) -> None:
    """Attach all handler groups to the provided router.

    The free-text chat handler goes last so commands are matched first.
    """

    start.setup(router, context)
    cart.setup(router, context)
    product.setup(router, context)
    chat.setup(router, context)
