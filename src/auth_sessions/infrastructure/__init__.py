"""Infrastructure adapters for the session store."""

from .repositories import RedisSessionStore, MemorySessionStore
from .factories import SessionStoreFactory, initialize_session_store, shutdown_session_store

__all__ = [
    "RedisSessionStore",
    "MemorySessionStore",
    "SessionStoreFactory",
    "initialize_session_store",
    "shutdown_session_store",
]
