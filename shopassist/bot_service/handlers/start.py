"""Start and help command handlers."""

from __future__ import annotations

from aiogram import Router
from aiogram.filters import Command, CommandStart
from aiogram.types import Message

from shopassist.bot_service.context import BotContext
from shopassist.bot_service.handlers.chat import answer_with_assistant
from shopassist.recommender.formatter import WELCOME_MESSAGE


def setup(router: Router, context: BotContext) -> None:
    """Register /start and /help handlers."""

    @router.message(CommandStart())
    async def handle_start(message: Message) -> None:
        await message.answer(WELCOME_MESSAGE)

    @router.message(Command("help"))
    async def handle_help(message: Message) -> None:
        await answer_with_assistant(message, context, "help")
