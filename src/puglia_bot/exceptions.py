"""Exceptions raised across the bot."""

from __future__ import annotations


class BotError(Exception):
    """Base class for bot errors."""


class UpstreamError(BotError):
    """An outbound call to the inference endpoint or events API failed."""


class TransportError(UpstreamError):
    """Network failure or timeout while talking to an upstream service."""


class ProtocolError(UpstreamError):
    """Upstream answered with a non-success status."""

    def __init__(self, status: int, body: str, *, service: str = "upstream") -> None:
        self.status = status
        self.body = body
        self.service = service
        super().__init__(f"{service} returned {status}: {body}")


class DecodeError(UpstreamError):
    """Upstream response was not valid JSON or did not match the expected shape."""


class AuthenticationError(BotError):
    """The chat platform rejected the bot credentials."""


__all__ = [
    "BotError",
    "UpstreamError",
    "TransportError",
    "ProtocolError",
    "DecodeError",
    "AuthenticationError",
]
