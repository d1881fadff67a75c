"""Process entry point: health server plus the Telegram session."""

from __future__ import annotations

import asyncio
import logging
import signal

from puglia_bot import __version__, health
from puglia_bot.clients.telegram import TelegramPlatform
from puglia_bot.config import core
from puglia_bot.exceptions import AuthenticationError
from puglia_bot.session import BotSession
from puglia_bot.status import ConnectionStatus

logger = logging.getLogger(__name__)


def _log_stop_failure(task: asyncio.Task) -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Shutdown after signal failed: %s", exc, exc_info=exc)


def _request_stop(session: BotSession, pending: set[asyncio.Task]) -> asyncio.Task:
    """Schedule ``session.stop()`` from a signal handler and keep hold of the task."""
    task = asyncio.ensure_future(session.stop())
    pending.add(task)
    task.add_done_callback(pending.discard)
    task.add_done_callback(_log_stop_failure)
    return task


async def serve() -> None:
    """Run until SIGINT/SIGTERM or until Telegram closes the update stream."""
    logger.info("Starting PugliaTechs bot v%s", __version__)

    status = ConnectionStatus()
    runner = await health.start_server(status, core.HTTP_PORT)
    session = BotSession(TelegramPlatform(), status)
    stop_tasks: set[asyncio.Task] = set()

    try:
        await session.start()

        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, _request_stop, session, stop_tasks)
            except NotImplementedError:  # pragma: no cover - Windows event loops
                pass

        await session.run()
        if stop_tasks:
            await asyncio.gather(*stop_tasks, return_exceptions=True)
        await session.stop()
    finally:
        await runner.cleanup()


def main() -> int:
    try:
        asyncio.run(serve())
    except AuthenticationError as exc:
        logger.error("Failed to start Telegram bot: %s", exc)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
