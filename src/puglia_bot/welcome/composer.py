"""Compose and send the welcome for a batch of joining members."""

from __future__ import annotations

import logging
from typing import Sequence

from puglia_bot.clients.telegram import ChatPlatform
from puglia_bot.welcome import classifier
from puglia_bot.welcome.templates import (
    ENGLISH_TEMPLATE,
    ITALIAN_TEMPLATE,
    NEUTRAL_TEMPLATE,
    render,
)

logger = logging.getLogger(__name__)


async def _pick_template(name: str) -> str:
    try:
        likely_italian = await classifier.is_likely_italian(name)
    except Exception as exc:
        logger.warning("Failed to classify name %r: %s", name, exc)
        likely_italian = False
    return ITALIAN_TEMPLATE if likely_italian else ENGLISH_TEMPLATE


async def greet(platform: ChatPlatform, names: Sequence[str], chat_id: int) -> None:
    """
    Send one welcome message for ``names``.

    Batch joins skip classification and get the neutral bilingual greeting;
    a single joiner is classified and greeted in Italian or English.
    Send failures are logged and swallowed.
    """
    names = list(names)
    if not names:
        return

    if len(names) > 1:
        template = NEUTRAL_TEMPLATE
    else:
        template = await _pick_template(names[0])

    message = render(template, names)
    try:
        await platform.send_message(chat_id, message)
    except Exception as exc:
        logger.warning("Failed to send welcome message to %s in chat %s: %s", names, chat_id, exc)
        return

    logger.info("Welcomed %s in chat %s", ", ".join(names), chat_id)


__all__ = ["greet"]
