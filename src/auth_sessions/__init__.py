"""auth-sessions - refresh-token session management backed by Redis.

Provides the session store (Redis and in-memory), the session use cases
(login, refresh rotation, logout, logout from all devices, session listing)
and a FastAPI router exposing them.
"""

from .__version__ import __version__
from .config import SessionSettings, get_settings, setup_logging
from .core import (
    ExpiryPolicy,
    RefreshToken,
    DEFAULT_TTL_SECONDS,
    UserIdentity,
    AuthResult,
    SessionStoreError,
    DuplicateTokenError,
    NotFoundError,
    InvalidRefreshTokenError,
    StorageUnavailableError,
    PartialDeletionError,
    AuthenticationFailedError,
    AccountDisabledError,
    SessionStore,
    IdentityProvider,
)
from .infrastructure import (
    RedisSessionStore,
    MemorySessionStore,
    SessionStoreFactory,
    initialize_session_store,
    shutdown_session_store,
)

__all__ = [
    "__version__",

    # Configuration
    "SessionSettings",
    "get_settings",
    "setup_logging",

    # Domain
    "ExpiryPolicy",
    "RefreshToken",
    "DEFAULT_TTL_SECONDS",
    "UserIdentity",
    "AuthResult",

    # Exceptions
    "SessionStoreError",
    "DuplicateTokenError",
    "NotFoundError",
    "InvalidRefreshTokenError",
    "StorageUnavailableError",
    "PartialDeletionError",
    "AuthenticationFailedError",
    "AccountDisabledError",

    # Protocols
    "SessionStore",
    "IdentityProvider",

    # Infrastructure
    "RedisSessionStore",
    "MemorySessionStore",
    "SessionStoreFactory",
    "initialize_session_store",
    "shutdown_session_store",
]
