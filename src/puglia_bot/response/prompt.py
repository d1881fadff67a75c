"""Grounded question-answering prompt."""

from __future__ import annotations

FRAMING = (
    "You are the PugliaTechs community assistant. Answer the question using ONLY "
    "the information in the manifesto and the upcoming events listed below. "
    "If the question is not about PugliaTechs, its manifesto or its events, or "
    "the answer is not contained in that material, politely decline and say you "
    "can only help with PugliaTechs topics. Do not invent events, dates or links. "
    "Reply in the same language as the question and keep the answer short."
)

MANIFESTO_HEADING = "Manifesto:"
EVENTS_HEADING = "Events:"
QUESTION_HEADING = "Question:"


def build_prompt(question: str, manifesto: str, events_listing: str) -> str:
    """Framing followed by the manifesto, events and question sections, verbatim."""
    sections = [
        FRAMING,
        f"{MANIFESTO_HEADING}\n{manifesto}",
        f"{EVENTS_HEADING}\n{events_listing}",
        f"{QUESTION_HEADING}\n{question}",
    ]
    return "\n\n".join(sections) + "\n\nAnswer:"


__all__ = ["FRAMING", "build_prompt"]
