"""HTTP status code mapping for exceptions."""

from typing import Dict, Type

from .base import SessionStoreError
from .duplicate_token import DuplicateTokenError
from .identity import AccountDisabledError, AuthenticationFailedError
from .not_found import InvalidRefreshTokenError, NotFoundError
from .storage_unavailable import PartialDeletionError, StorageUnavailableError

HTTP_STATUS_MAP: Dict[Type[SessionStoreError], int] = {
    # 401 Unauthorized
    AuthenticationFailedError: 401,
    InvalidRefreshTokenError: 401,

    # 403 Forbidden
    AccountDisabledError: 403,

    # 404 Not Found
    NotFoundError: 404,

    # 409 Conflict
    DuplicateTokenError: 409,

    # 503 Service Unavailable
    StorageUnavailableError: 503,
    PartialDeletionError: 503,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception, walking the MRO for the closest match.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code, 500 for anything unmapped
    """
    for cls in type(exception).__mro__:
        if cls in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[cls]
    return 500
