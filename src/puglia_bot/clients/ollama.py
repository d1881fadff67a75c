"""Helpers for interacting with the local Ollama server"""

from __future__ import annotations

import logging
from contextlib import aclosing
from typing import Any, AsyncIterator, Mapping

import httpx
from ollama import AsyncClient, ResponseError

from puglia_bot.config import local_llm
from puglia_bot.exceptions import DecodeError, ProtocolError, TransportError

logger = logging.getLogger(__name__)

client = AsyncClient(host=local_llm.OLLAMA_HOST, timeout=local_llm.REQUEST_TIMEOUT)


async def stream_chunks(
        prompt: str,
        model: str | None = None,
        options: Mapping[str, Any] | None = None,
        *,
        ollama_client: AsyncClient | None = None,
    ) -> AsyncIterator[str]:
    """
    Yield the text fragments of a streamed ``/api/generate`` response.

    The server answers with newline-delimited JSON chunks such as:

    .. code-block:: json

        {"response": "IT", "done": false}
        {"response": "ALIAN", "done": false}
        {"response": "", "done": true}

    Iteration stops at the first chunk flagged ``done`` or when the stream
    ends. Every call issues exactly one request.
    """
    active = ollama_client or client
    model = model or local_llm.OLLAMA_MODEL
    logger.debug("Sending prompt to Ollama (model=%s, options=%s)", model, dict(options or {}))

    try:
        stream = await active.generate(
            model=model,
            prompt=prompt,
            stream=True,
            options=dict(options) if options else None,
        )
        async with aclosing(stream):
            async for part in stream:
                if part.response:
                    yield part.response
                if part.done:
                    return
    except ResponseError as exc:
        logger.warning("Ollama API error (status=%s): %s", exc.status_code, exc.error)
        raise ProtocolError(exc.status_code, exc.error, service="ollama") from exc
    except (httpx.TransportError, ConnectionError) as exc:
        raise TransportError(f"ollama request failed: {exc}") from exc
    except ValueError as exc:
        # json.JSONDecodeError and pydantic's ValidationError both land here
        raise DecodeError(f"malformed ollama chunk: {exc}") from exc


async def generate(
        prompt: str,
        model: str | None = None,
        options: Mapping[str, Any] | None = None,
        *,
        ollama_client: AsyncClient | None = None,
    ) -> str:
    """Send a prompt to the local Ollama server and return the whole reply."""
    fragments = [
        fragment
        async for fragment in stream_chunks(
            prompt, model, options, ollama_client=ollama_client
        )
    ]
    text = "".join(fragments)
    logger.debug("Ollama response received: %r", text)
    return text


__all__ = ["client", "stream_chunks", "generate"]
