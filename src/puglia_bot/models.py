"""Domain models shared by the session, hooks and platform adapters.

Keeping these free of telethon types lets the core be driven by any platform
client that can produce :class:`UpdateEvent` values.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Member:
    """A user reported as joining a chat."""

    id: int
    first_name: str
    username: str | None = None


@dataclass(frozen=True)
class UpdateEvent:
    """One inbound chat notification, consumed exactly once by the session."""

    chat_id: int
    message_id: int | None = None
    text: str | None = None
    sender_id: int | None = None
    new_members: tuple[Member, ...] = ()
    is_private: bool = False


@dataclass(frozen=True)
class BotIdentity:
    """The authenticated bot account."""

    id: int
    username: str

    @property
    def mention(self) -> str:
        return f"@{self.username}"


@dataclass(frozen=True)
class ClassificationResult:
    """Verdict of the name classifier plus the raw model text for diagnostics."""

    is_match: bool
    raw_text: str
