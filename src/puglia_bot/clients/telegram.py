"""Telegram bot bootstrap and update adapter."""

from __future__ import annotations

import asyncio
import logging
from typing import AsyncIterator, Protocol

from telethon import TelegramClient, events
from telethon.sessions import Session

from puglia_bot.config import core
from puglia_bot.models import BotIdentity, Member, UpdateEvent

logger = logging.getLogger(__name__)


class ChatPlatform(Protocol):
    """Operations the session needs from a chat platform client."""

    async def connect(self) -> BotIdentity:
        ...

    def updates(self) -> AsyncIterator[UpdateEvent]:
        ...

    async def send_message(
        self, chat_id: int, text: str, *, reply_to: int | None = None
    ) -> None:
        ...

    async def disconnect(self) -> None:
        ...


class TelegramPlatform:
    """
    Telethon-backed platform client logged in with a bot token.

    Telethon delivers updates through callbacks; they are converted to
    :class:`UpdateEvent` values and queued so the session can consume them as
    one ordered stream.
    """

    def __init__(
        self,
        token: str | None = None,
        api_id: int | None = None,
        api_hash: str | None = None,
        session: str | Session | None = None,
    ) -> None:
        self._token = token or core.TELEGRAM_BOT_TOKEN
        self._client = TelegramClient(
            session if session is not None else core.SESSION_NAME,
            api_id or core.TELEGRAM_API_ID,
            api_hash or core.TELEGRAM_API_HASH,
        )
        self._queue: asyncio.Queue[UpdateEvent | None] = asyncio.Queue()

    async def connect(self) -> BotIdentity:
        logger.info("Initializing Telegram client")
        await self._client.start(bot_token=self._token)
        me = await self._client.get_me()

        self._client.add_event_handler(self._on_chat_action, events.ChatAction())
        self._client.add_event_handler(self._on_new_message, events.NewMessage())

        logger.info("Logged in as @%s (ID: %s)", me.username, me.id)
        return BotIdentity(id=me.id, username=me.username or "")

    async def _on_chat_action(self, event: events.ChatAction.Event) -> None:
        if not (event.user_joined or event.user_added):
            return

        users = await event.get_users()
        members = tuple(
            Member(id=user.id, first_name=user.first_name or "", username=user.username)
            for user in users
            if user is not None
        )
        action_message = getattr(event, "action_message", None)
        await self._queue.put(
            UpdateEvent(
                chat_id=event.chat_id,
                message_id=getattr(action_message, "id", None),
                new_members=members,
                is_private=bool(event.is_private),
            )
        )

    async def _on_new_message(self, event: events.NewMessage.Event) -> None:
        await self._queue.put(
            UpdateEvent(
                chat_id=event.chat_id,
                message_id=event.id,
                text=event.raw_text,
                sender_id=event.sender_id,
                is_private=bool(event.is_private),
            )
        )

    async def updates(self) -> AsyncIterator[UpdateEvent]:
        """Yield updates in arrival order until :meth:`disconnect` closes the stream."""
        while True:
            update = await self._queue.get()
            if update is None:
                return
            yield update

    async def send_message(
        self, chat_id: int, text: str, *, reply_to: int | None = None
    ) -> None:
        logger.debug("Sending message to chat %s (reply_to=%s)", chat_id, reply_to)
        await self._client.send_message(
            chat_id, text, link_preview=False, reply_to=reply_to
        )

    async def disconnect(self) -> None:
        await self._queue.put(None)
        await self._client.disconnect()


__all__ = ["ChatPlatform", "TelegramPlatform"]
