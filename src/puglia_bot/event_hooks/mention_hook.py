"""
Answer messages that mention the bot.
"""

from __future__ import annotations

import logging
import re

from puglia_bot import response
from puglia_bot.clients import events
from puglia_bot.clients.telegram import ChatPlatform
from puglia_bot.models import BotIdentity, UpdateEvent

logger = logging.getLogger(__name__)


def _mention_pattern(bot: BotIdentity) -> re.Pattern[str]:
    # Telegram usernames are case-insensitive and made of word characters.
    return re.compile(re.escape(bot.mention) + r"(?!\w)", re.IGNORECASE)


def is_mention(text: str | None, bot: BotIdentity) -> bool:
    if not text or not bot.username:
        return False
    return _mention_pattern(bot).search(text) is not None


def strip_mention(text: str, bot: BotIdentity) -> str:
    return _mention_pattern(bot).sub("", text).strip()


async def _events_listing() -> str:
    try:
        return await events.fetch_upcoming()
    except Exception as exc:
        logger.warning("Failed to fetch upcoming events: %s", exc)
        return events.NO_EVENTS


async def handle(
    platform: ChatPlatform, bot: BotIdentity, update: UpdateEvent, manifesto: str
) -> None:
    """Answer the question in ``update`` and reply to the original message."""
    question = strip_mention(update.text or "", bot)
    logger.info("Question from %s in chat %s: %r", update.sender_id, update.chat_id, question)

    listing = await _events_listing()

    try:
        reply = await response.answer(question, manifesto, listing)
    except Exception:
        logger.exception("Failed to generate answer for message %s", update.message_id)
        return

    reply = reply.strip()
    if not reply:
        logger.warning("Model returned an empty answer for message %s", update.message_id)
        return

    try:
        await platform.send_message(update.chat_id, reply, reply_to=update.message_id)
    except Exception as exc:
        logger.warning("Failed to send answer to chat %s: %s", update.chat_id, exc)
