"""Session history stores."""

from .memory_store import InMemorySessionStore
from .redis_store import RedisSessionStore

__all__ = ["InMemorySessionStore", "RedisSessionStore"]
