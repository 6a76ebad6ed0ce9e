"""Session store implementations."""

from .redis_session_store import RedisSessionStore
from .memory_session_store import MemorySessionStore

__all__ = ["RedisSessionStore", "MemorySessionStore"]
