"""Entrypoint for the Telegram shopping bot."""

from __future__ import annotations

import asyncio
import logging
from contextlib import suppress

from aiogram import Bot, Dispatcher, Router
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode

from shopassist.bot_service.context import BotContext
from shopassist.bot_service.handlers import setup_handlers
from shopassist.catalog.client import CatalogClient
from shopassist.config.settings import get_settings
from shopassist.monitoring.logging import configure_logging
from shopassist.services.assistant import AssistantSession
from shopassist.services.cart import CartRegistry, CartService

logger = logging.getLogger(__name__)


async def main() -> None:
    """Initialise dependencies and start polling Telegram."""

    configure_logging()

    settings = get_settings()
    if not settings.telegram_bot_token:
        raise RuntimeError("TELEGRAM_BOT_TOKEN is not configured.")

    catalog = CatalogClient(settings)
    session = AssistantSession(catalog)
    await session.initialize()
    context = BotContext(
        session=session,
        carts=CartRegistry(),
        cart_service=CartService(catalog, settings),
        catalog=catalog,
    )

    bot = Bot(
        token=settings.telegram_bot_token,
        default=DefaultBotProperties(parse_mode=ParseMode.HTML),
    )
    dispatcher = Dispatcher()
    router = Router()
    setup_handlers(router, context)
    dispatcher.include_router(router)

    try:
        logger.info("Starting shopping bot polling.")
        await dispatcher.start_polling(bot)
    finally:
        with suppress(Exception):
            await bot.session.close()
        with suppress(Exception):
            await catalog.close()


if __name__ == "__main__":
    asyncio.run(main())
