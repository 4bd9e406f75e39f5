"""Process-local session store used when Redis is disabled, and in tests."""

import time
from typing import Any

from ....core.domain import SessionMessage
from ....core.ports.session_store_port import SessionStorePort
from .redis_store import DEFAULT_HISTORY_TTL, TimestampClock


class InMemorySessionStore(SessionStorePort):
    """Dictionary-backed session store with the same TTL semantics as Redis."""

    def __init__(self, history_ttl: int = DEFAULT_HISTORY_TTL) -> None:
        self.history_ttl = history_ttl
        self._sessions: dict[str, tuple[float, list[SessionMessage]]] = {}
        self._cache: dict[str, tuple[float, Any]] = {}
        self._clock = TimestampClock()

    @property
    def available(self) -> bool:
        return True

    def _sweep(self) -> None:
        """Drop every expired session and cache entry."""
        now = time.monotonic()
        for store in (self._sessions, self._cache):
            for key in [key for key, (expires_at, _) in store.items() if expires_at <= now]:
                del store[key]

    def _messages(self, session_id: str) -> list[SessionMessage]:
        entry = self._sessions.get(session_id)
        if entry is None:
            return []
        expires_at, messages = entry
        if expires_at <= time.monotonic():
            del self._sessions[session_id]
            return []
        return messages

    async def append(self, session_id: str, message: SessionMessage) -> None:
        self._sweep()
        messages = self._messages(session_id)
        message.timestamp = self._clock.next()
        messages.append(message)
        self._sessions[session_id] = (time.monotonic() + self.history_ttl, messages)

    async def history(self, session_id: str, limit: int = 50) -> list[SessionMessage]:
        if limit <= 0:
            return []
        return list(self._messages(session_id)[:limit])

    async def latest(self, session_id: str) -> SessionMessage | None:
        messages = self._messages(session_id)
        return messages[-1] if messages else None

    async def clear(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    async def get_json(self, key: str) -> Any | None:
        entry = self._cache.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if expires_at <= time.monotonic():
            del self._cache[key]
            return None
        return value

    async def set_json(self, key: str, value: Any, ttl: int) -> None:
        self._sweep()
        self._cache[key] = (time.monotonic() + ttl, value)
