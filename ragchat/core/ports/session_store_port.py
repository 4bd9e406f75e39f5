"""Session Store Port Interface.

Implementations must never raise to callers: unavailability degrades to
"no history persisted".
"""

from abc import ABC, abstractmethod
from typing import Any

from ..domain import SessionInfo, SessionMessage


class SessionStorePort(ABC):
    """Abstract interface for session history and small JSON cache entries."""

    @abstractmethod
    async def append(self, session_id: str, message: SessionMessage) -> None: ...

    @abstractmethod
    async def history(self, session_id: str, limit: int = 50) -> list[SessionMessage]: ...

    @abstractmethod
    async def latest(self, session_id: str) -> SessionMessage | None:
        """Most recent message of the session, if any."""
        ...

    @abstractmethod
    async def clear(self, session_id: str) -> None: ...

    @abstractmethod
    async def get_json(self, key: str) -> Any | None: ...

    @abstractmethod
    async def set_json(self, key: str, value: Any, ttl: int) -> None: ...

    @property
    @abstractmethod
    def available(self) -> bool: ...

    async def info(self, session_id: str) -> SessionInfo:
        """Summarize whether the session has history and when it was last active."""
        last = await self.latest(session_id)
        return SessionInfo(
            session_id=session_id,
            is_active=last is not None,
            last_activity=last.timestamp if last else None,
        )
