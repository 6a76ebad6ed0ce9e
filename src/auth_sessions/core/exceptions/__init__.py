"""Session domain exceptions.

Each exception handles exactly one failure scenario.
"""

from .base import SessionStoreError, create_error_response, mask_token
from .duplicate_token import DuplicateTokenError
from .not_found import NotFoundError, InvalidRefreshTokenError
from .storage_unavailable import StorageUnavailableError, PartialDeletionError
from .identity import AuthenticationFailedError, AccountDisabledError
from .http_mapping import HTTP_STATUS_MAP, get_http_status_code

__all__ = [
    "SessionStoreError",
    "create_error_response",
    "mask_token",
    "DuplicateTokenError",
    "NotFoundError",
    "InvalidRefreshTokenError",
    "StorageUnavailableError",
    "PartialDeletionError",
    "AuthenticationFailedError",
    "AccountDisabledError",
    "HTTP_STATUS_MAP",
    "get_http_status_code",
]
