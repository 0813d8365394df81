"""Free-text chat handler that forwards messages to the assistant."""

from __future__ import annotations

import html
import logging

from aiogram import F, Router
from aiogram.types import Message

from shopassist.bot_service.context import BotContext
from shopassist.recommender.models import AssistantReply
from shopassist.services.assistant import APOLOGY_REPLY

logger = logging.getLogger(__name__)


def render_reply(result: AssistantReply) -> str:
    """Render reply text and suggestion cards as Telegram HTML."""

    blocks = [html.escape(result.reply)]
    for suggestion in result.suggestions.suggestions:
        blocks.append(
            f"<b>{html.escape(suggestion.title)}</b> ${suggestion.price:.2f}\n"
            f"{html.escape(suggestion.reason)}\n"
            f"/add {suggestion.id}  /product {suggestion.id}"
        )
    return "\n\n".join(blocks)


async def answer_with_assistant(message: Message, context: BotContext, text: str) -> None:
    """Run ``text`` through the assistant and reply; failures get an apology."""

    try:
        result = await context.session.process_message(text)
    except Exception:
        logger.exception("Failed to process chat message")
        await message.answer(APOLOGY_REPLY)
        return
    await message.answer(render_reply(result))


def setup(router: Router, context: BotContext) -> None:
    """Register the catch-all text handler."""

    @router.message(F.text & ~F.text.startswith("/"))
    async def handle_text(message: Message) -> None:
        await answer_with_assistant(message, context, message.text)
