"""
Events Fetcher
===========
1. GET the lu.ma calendar API (future events, first page).
2. Decode ``{"entries": [{"event": {...}}]}`` into :class:`Event` records.
3. Render a bulleted listing for the responder prompt, or the
   ``NO_EVENTS`` sentinel when the calendar is empty.

NOTE: An empty calendar is a normal result, not an error.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, List

import aiohttp

from puglia_bot.config import events as events_cfg
from puglia_bot.exceptions import DecodeError, ProtocolError, TransportError

logger = logging.getLogger(__name__)

NO_EVENTS = "No upcoming events found."
LISTING_HEADER = "Upcoming events:"
LUMA_BASE_URL = "https://lu.ma/"
ONLINE_LOCATION = "online"


@dataclass(frozen=True)
class Event:
    name: str
    start_at: str
    location: str
    url: str

    @property
    def link(self) -> str:
        if self.url.startswith(("http://", "https://")):
            return self.url
        return LUMA_BASE_URL + self.url.lstrip("/")


def _require_str(obj: dict, key: str) -> str:
    value = obj.get(key)
    if not isinstance(value, str):
        raise DecodeError(f"event field {key!r} missing or not a string")
    return value


def parse_entries(data: Any) -> List[Event]:
    """Turn the decoded API body into events, raising DecodeError on shape mismatch."""
    if not isinstance(data, dict) or not isinstance(data.get("entries"), list):
        raise DecodeError("expected an object with an 'entries' list")

    parsed: List[Event] = []
    for entry in data["entries"]:
        event = entry.get("event") if isinstance(entry, dict) else None
        if not isinstance(event, dict):
            raise DecodeError("entry without an 'event' object")

        geo = event.get("geo_address_info") or {}
        if not isinstance(geo, dict):
            raise DecodeError("'geo_address_info' is not an object")
        location = geo.get("full_address") or ONLINE_LOCATION

        parsed.append(
            Event(
                name=_require_str(event, "name"),
                start_at=_require_str(event, "start_at"),
                location=str(location),
                url=_require_str(event, "url"),
            )
        )
    return parsed


def render_listing(items: List[Event]) -> str:
    if not items:
        return NO_EVENTS
    lines = [LISTING_HEADER]
    lines.extend(
        f"- {item.name} at {item.location}, on {item.start_at}: {item.link}"
        for item in items
    )
    return "\n".join(lines)


async def _get_json(session: aiohttp.ClientSession, url: str) -> Any:
    async with session.get(url) as resp:
        raw = await resp.read()
        encoding = resp.charset or "utf-8"
        if not 200 <= resp.status < 300:
            body = raw.decode(encoding, errors="replace")
            logger.warning("Events API error (status=%s): %s", resp.status, body[:200])
            raise ProtocolError(resp.status, body, service="events api")
    try:
        # UnicodeDecodeError is a ValueError too
        return json.loads(raw.decode(encoding))
    except ValueError as exc:
        raise DecodeError(f"malformed events payload: {exc}") from exc


async def fetch_upcoming(
    url: str | None = None, *, session: aiohttp.ClientSession | None = None
) -> str:
    """
    Fetch upcoming events and render them as a human-readable listing.

    :param url: Calendar API URL; defaults to the configured lu.ma calendar.
    :param session: Optional shared session; a short-lived one is opened otherwise.
    :returns: The listing, or :data:`NO_EVENTS` when the calendar is empty.
    """
    url = url or events_cfg.LUMA_URL
    logger.debug("Fetching upcoming events from %s", url)

    try:
        if session is not None:
            data = await _get_json(session, url)
        else:
            timeout = aiohttp.ClientTimeout(total=events_cfg.REQUEST_TIMEOUT)
            async with aiohttp.ClientSession(timeout=timeout) as own_session:
                data = await _get_json(own_session, url)
    except aiohttp.ClientError as exc:
        raise TransportError(f"events request failed: {exc}") from exc
    except asyncio.TimeoutError as exc:
        raise TransportError("events request timed out") from exc

    listing = render_listing(parse_entries(data))
    logger.debug("Events listing: %s", listing)
    return listing


__all__ = ["NO_EVENTS", "Event", "parse_entries", "render_listing", "fetch_upcoming"]
