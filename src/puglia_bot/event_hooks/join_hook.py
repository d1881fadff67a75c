"""
Handle membership updates that should trigger a welcome.
"""

from __future__ import annotations

import logging

from puglia_bot.clients.telegram import ChatPlatform
from puglia_bot.models import BotIdentity, UpdateEvent
from puglia_bot.welcome import composer

logger = logging.getLogger(__name__)


def joiner_names(update: UpdateEvent, bot: BotIdentity) -> list[str]:
    """First names of the joining members, without the bot itself."""
    return [member.first_name for member in update.new_members if member.id != bot.id]


async def handle(platform: ChatPlatform, bot: BotIdentity, update: UpdateEvent) -> None:
    names = joiner_names(update, bot)
    if not names:
        return

    logger.debug("New members joined chat %s: %s", update.chat_id, names)
    await composer.greet(platform, names, update.chat_id)
