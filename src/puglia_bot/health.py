"""HTTP health endpoint reporting the Telegram connection status."""

from __future__ import annotations

import logging

from aiohttp import web

from puglia_bot.status import ConnectionStatus

logger = logging.getLogger(__name__)

STATUS_KEY = web.AppKey("connection_status", ConnectionStatus)


async def _health(request: web.Request) -> web.Response:
    if request.app[STATUS_KEY].is_connected():
        logger.debug("Health check passed")
        return web.Response(text="OK")

    logger.warning("Health check failed: Telegram bot is disconnected")
    return web.Response(status=500, text="ERROR: Telegram bot is disconnected")


def build_app(status: ConnectionStatus) -> web.Application:
    app = web.Application()
    app[STATUS_KEY] = status
    app.router.add_get("/health", _health)
    return app


async def start_server(status: ConnectionStatus, port: int) -> web.AppRunner:
    """Serve ``/health`` on ``port``; the caller owns ``runner.cleanup()``."""
    runner = web.AppRunner(build_app(status))
    await runner.setup()
    site = web.TCPSite(runner, port=port)
    await site.start()
    logger.info("Health endpoint listening on port %s", port)
    return runner


__all__ = ["build_app", "start_server"]
