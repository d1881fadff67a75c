"""Connection health shared between the session and the health endpoint."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """
    Many concurrent readers or a single writer.

    Writers wait for active readers to leave and block new readers while
    waiting, so a steady stream of health checks cannot starve a status update.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


class ConnectionStatus:
    """Whether the bot is currently authenticated with Telegram. Defaults to False."""

    def __init__(self, connected: bool = False) -> None:
        self._lock = ReadWriteLock()
        self._connected = connected

    def is_connected(self) -> bool:
        with self._lock.read():
            return self._connected

    def set_connected(self, value: bool) -> None:
        with self._lock.write():
            self._connected = bool(value)


__all__ = ["ReadWriteLock", "ConnectionStatus"]
