"""Entry-point helpers for answering questions addressed to the bot."""

from __future__ import annotations

import logging

from puglia_bot.clients import ollama
from puglia_bot.response.prompt import build_prompt

logger = logging.getLogger(__name__)


async def answer(question: str, manifesto: str, events_listing: str, **kwargs) -> str:
    """
    Generate a grounded answer to ``question``.

    The model text is returned as-is; inference errors propagate unchanged.
    """
    prompt = build_prompt(question, manifesto, events_listing)
    logger.debug("Answering question %r (prompt length=%d)", question, len(prompt))
    return await ollama.generate(prompt, **kwargs)


__all__ = ["answer"]
