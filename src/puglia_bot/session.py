"""
Long-lived Telegram session: authentication, update intake and dispatch.

Each update is handled in its own task so a slow model call never blocks
intake of the next update. :meth:`BotSession.stop` lets in-flight work drain
for a grace period and cancels whatever is still running afterwards.
"""

from __future__ import annotations

import asyncio
import enum
import logging
from contextlib import aclosing

from puglia_bot.clients.telegram import ChatPlatform
from puglia_bot.config import core
from puglia_bot.event_hooks import join_hook, mention_hook
from puglia_bot.exceptions import AuthenticationError
from puglia_bot.models import BotIdentity, UpdateEvent
from puglia_bot.status import ConnectionStatus

logger = logging.getLogger(__name__)


class SessionState(enum.Enum):
    UNAUTHENTICATED = "unauthenticated"
    LISTENING = "listening"
    STOPPED = "stopped"


class BotSession:
    def __init__(
        self,
        platform: ChatPlatform,
        status: ConnectionStatus,
        *,
        manifesto: str | None = None,
        shutdown_grace: float | None = None,
    ) -> None:
        self.platform = platform
        self.status = status
        self.manifesto = core.manifesto if manifesto is None else manifesto
        self.shutdown_grace = core.SHUTDOWN_GRACE if shutdown_grace is None else shutdown_grace
        self.state = SessionState.UNAUTHENTICATED
        self.bot: BotIdentity | None = None
        self._stop_requested = asyncio.Event()
        self._stopped = asyncio.Event()
        self._inflight: set[asyncio.Task] = set()

    async def start(self) -> BotIdentity:
        """Authenticate with the platform; failure is fatal to the session."""
        try:
            self.bot = await self.platform.connect()
        except Exception as exc:
            self.status.set_connected(False)
            self.state = SessionState.STOPPED
            logger.error("Telegram authentication failed: %s", exc)
            raise AuthenticationError(str(exc)) from exc

        self.status.set_connected(True)
        self.state = SessionState.LISTENING
        logger.info("Bot authorized as %s", self.bot.mention)
        return self.bot

    async def run(self) -> None:
        """Consume updates until the platform closes the stream or stop() is called."""
        if self.state is not SessionState.LISTENING:
            raise RuntimeError(f"Cannot listen from state {self.state.value}")

        logger.debug("Listening for updates")
        stop_wait = asyncio.create_task(self._stop_requested.wait())
        try:
            async with aclosing(self.platform.updates()) as updates:
                while True:
                    next_update = asyncio.ensure_future(anext(updates))
                    done, _ = await asyncio.wait(
                        {next_update, stop_wait}, return_when=asyncio.FIRST_COMPLETED
                    )
                    if stop_wait in done or self._stop_requested.is_set():
                        # An update that arrived alongside the stop request is dropped.
                        next_update.cancel()
                        await asyncio.gather(next_update, return_exceptions=True)
                        break
                    try:
                        update = next_update.result()
                    except StopAsyncIteration:
                        logger.info("Update stream closed by the platform")
                        break
                    self.dispatch(update)
        finally:
            stop_wait.cancel()

    def dispatch(self, update: UpdateEvent) -> asyncio.Task:
        """Handle ``update`` in a background task owned by the session."""
        task = asyncio.create_task(self._handle_logged(update))
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)
        return task

    async def _handle_logged(self, update: UpdateEvent) -> None:
        try:
            await self.handle_update(update)
        except Exception:
            logger.exception("Unhandled error while processing update in chat %s", update.chat_id)

    async def handle_update(self, update: UpdateEvent) -> None:
        """Route one update: private → ignore, joins → welcome, mentions → answer."""
        if self.bot is None:
            raise RuntimeError("Session is not authenticated")

        logger.debug("Processing update in chat %s (message=%s)", update.chat_id, update.message_id)

        if update.is_private:
            return

        if join_hook.joiner_names(update, self.bot):
            await join_hook.handle(self.platform, self.bot, update)
            return

        if mention_hook.is_mention(update.text, self.bot):
            await mention_hook.handle(self.platform, self.bot, update, self.manifesto)

    async def stop(self) -> None:
        """Stop intake, drain in-flight work for the grace period, then disconnect."""
        if self.state is SessionState.STOPPED:
            return
        if self._stop_requested.is_set():
            await self._stopped.wait()
            return

        self._stop_requested.set()
        pending = set(self._inflight)
        if pending:
            logger.info("Waiting up to %ss for %d in-flight update(s)", self.shutdown_grace, len(pending))
            _, still_running = await asyncio.wait(pending, timeout=self.shutdown_grace)
            for task in still_running:
                task.cancel()
            if still_running:
                logger.warning("Cancelled %d update(s) still running at shutdown", len(still_running))
                await asyncio.gather(*still_running, return_exceptions=True)

        try:
            await self.platform.disconnect()
        finally:
            self.status.set_connected(False)
            self.state = SessionState.STOPPED
            self._stopped.set()
            logger.info("Session stopped")


__all__ = ["SessionState", "BotSession"]
