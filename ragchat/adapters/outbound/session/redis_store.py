"""Redis-backed session history and JSON cache.

History for a session lives in the sorted set ``session:<id>:history``,
scored by epoch-millisecond timestamp, with the TTL refreshed on every
append. Every Redis failure is logged and swallowed: reads return empty
results and writes become no-ops.
"""

import json
import logging
import time
from typing import Any

import redis.asyncio as redis

from ....core.domain import SessionMessage
from ....core.ports.session_store_port import SessionStorePort

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_TTL = 24 * 60 * 60


def history_key(session_id: str) -> str:
    return f"session:{session_id}:history"


class TimestampClock:
    """Epoch-millisecond timestamps that strictly increase within the process.

    Two appends in the same millisecond would otherwise tie in the sorted set
    and be ordered by member text instead of insertion order.
    """

    def __init__(self) -> None:
        self._last = 0

    def next(self) -> int:
        now = int(time.time() * 1000)
        self._last = max(now, self._last + 1)
        return self._last


class RedisSessionStore(SessionStorePort):
    """Session store on Redis sorted sets."""

    def __init__(
        self,
        url: str = "redis://127.0.0.1:6379",
        password: str | None = None,
        history_ttl: int = DEFAULT_HISTORY_TTL,
        client: "redis.Redis | None" = None,
    ) -> None:
        """Initialize the store.

        Args:
            url: Redis connection URL.
            password: Optional Redis password.
            history_ttl: Seconds a session's history survives after its last append.
            client: Pre-built client (tests).
        """
        self.url = url
        self.password = password or None
        self.history_ttl = history_ttl
        self._redis = client
        self._healthy = client is not None
        self._clock = TimestampClock()

    @property
    def available(self) -> bool:
        return self._redis is not None and self._healthy

    async def connect(self) -> None:
        """Create the client and ping it. Failure is logged, not raised."""
        if self._redis is None:
            self._redis = redis.from_url(
                self.url,
                password=self.password,
                encoding="utf-8",
                decode_responses=True,
            )
        try:
            await self._redis.ping()
            self._healthy = True
            logger.info("Connected to Redis at %s", self.url)
        except Exception as e:
            self._healthy = False
            logger.warning("Redis initial connect failed (will retry per command): %s", e)

    async def close(self) -> None:
        if self._redis is not None:
            await self._redis.aclose()
            logger.info("Closed Redis connection")

    def _mark(self, ok: bool) -> None:
        self._healthy = ok

    async def append(self, session_id: str, message: SessionMessage) -> None:
        if self._redis is None:
            return
        key = history_key(session_id)
        message.timestamp = self._clock.next()
        try:
            await self._redis.zadd(key, {json.dumps(message.to_dict()): message.timestamp})
            await self._redis.expire(key, self.history_ttl)
            self._mark(True)
        except Exception as e:
            self._mark(False)
            logger.error("Error saving session history for %s: %s", session_id, e)

    async def _range(self, session_id: str, start: int, stop: int) -> list[SessionMessage]:
        if self._redis is None:
            return []
        try:
            raw = await self._redis.zrange(history_key(session_id), start, stop)
            self._mark(True)
            return [SessionMessage.from_dict(json.loads(item)) for item in raw]
        except Exception as e:
            self._mark(False)
            logger.error("Error retrieving session history for %s: %s", session_id, e)
            return []

    async def history(self, session_id: str, limit: int = 50) -> list[SessionMessage]:
        if limit <= 0:
            return []
        return await self._range(session_id, 0, limit - 1)

    async def latest(self, session_id: str) -> SessionMessage | None:
        messages = await self._range(session_id, -1, -1)
        return messages[0] if messages else None

    async def clear(self, session_id: str) -> None:
        if self._redis is None:
            return
        try:
            await self._redis.delete(history_key(session_id))
            self._mark(True)
        except Exception as e:
            self._mark(False)
            logger.error("Error clearing session %s: %s", session_id, e)

    async def get_json(self, key: str) -> Any | None:
        if self._redis is None:
            return None
        try:
            value = await self._redis.get(key)
            self._mark(True)
        except Exception as e:
            self._mark(False)
            logger.error("Cache get error for key %s: %s", key, e)
            return None
        if value is None:
            return None
        try:
            return json.loads(value)
        except (json.JSONDecodeError, TypeError):
            logger.warning("Discarding non-JSON cache value for key %s", key)
            return None

    async def set_json(self, key: str, value: Any, ttl: int) -> None:
        if self._redis is None:
            return
        try:
            await self._redis.setex(key, ttl, json.dumps(value))
            self._mark(True)
        except Exception as e:
            self._mark(False)
            logger.error("Cache set error for key %s: %s", key, e)
