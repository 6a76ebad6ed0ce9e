"""Core session domain objects.

Components:
- value_objects: Immutable session value objects
- entities: The refresh-token session and the user identity
- exceptions: Session-specific exceptions with HTTP mapping
- protocols: Contracts for the session store and the identity layer
"""

from .value_objects import ExpiryPolicy
from .entities import RefreshToken, DEFAULT_TTL_SECONDS, UserIdentity, AuthResult
from .exceptions import (
    SessionStoreError,
    DuplicateTokenError,
    NotFoundError,
    InvalidRefreshTokenError,
    StorageUnavailableError,
    PartialDeletionError,
    AuthenticationFailedError,
    AccountDisabledError,
)
from .protocols import SessionStore, IdentityProvider

__all__ = [
    # Value Objects
    "ExpiryPolicy",

    # Entities
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
]
