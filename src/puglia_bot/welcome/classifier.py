"""Classify a first name as likely Italian using the local model."""

from __future__ import annotations

import logging

from puglia_bot.clients import ollama
from puglia_bot.models import ClassificationResult

logger = logging.getLogger(__name__)

POSITIVE_TOKEN = "ITALIAN"
NEGATIVE_TOKEN = "FOREIGN"

# Fixed for reproducible verdicts.
CLASSIFIER_OPTIONS = {"temperature": 0, "top_p": 1}

_PROMPT_TEMPLATE = (
    "You are a name classifier. I will give you a first name, and you reply with "
    "exactly one word: either '{positive}' if this name is likely from an Italian "
    "person, or '{negative}' if it is not. The name is: \"{name}\".\n\nAnswer:"
)


def build_prompt(name: str) -> str:
    return _PROMPT_TEMPLATE.format(
        positive=POSITIVE_TOKEN, negative=NEGATIVE_TOKEN, name=name
    )


def reduce_verdict(text: str) -> bool:
    """
    Models often wrap the answer ("Likely ITALIAN.", "italian!"), so the
    positive token is matched as a substring of the normalized text.
    """
    return POSITIVE_TOKEN in text.strip().upper()


async def classify_name(name: str, **kwargs) -> ClassificationResult:
    """
    Ask the model whether ``name`` is likely Italian.

    Extra keyword arguments are forwarded to :func:`ollama.generate`. Inference
    errors propagate; callers decide the fallback.
    """
    raw = await ollama.generate(build_prompt(name), options=CLASSIFIER_OPTIONS, **kwargs)
    result = ClassificationResult(is_match=reduce_verdict(raw), raw_text=raw)
    logger.debug("classify: %r -> %s (raw=%r)", name, result.is_match, raw)
    return result


async def is_likely_italian(name: str, **kwargs) -> bool:
    return (await classify_name(name, **kwargs)).is_match


__all__ = [
    "POSITIVE_TOKEN",
    "NEGATIVE_TOKEN",
    "CLASSIFIER_OPTIONS",
    "build_prompt",
    "reduce_verdict",
    "classify_name",
    "is_likely_italian",
]
