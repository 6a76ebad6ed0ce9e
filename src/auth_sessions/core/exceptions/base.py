"""Base exceptions for auth-sessions.

All exceptions inherit from SessionStoreError and include error codes and
details so the HTTP layer can render structured error responses.
"""

from typing import Any, Dict, Optional


class SessionStoreError(Exception):
    """Base exception for all auth-sessions errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def mask_token(token: Optional[str]) -> str:
    """Mask a token for logs and error details."""
    if not token or len(token) <= 12:
        return "***"
    return f"{token[:6]}...{token[-4:]}"


def create_error_response(exception: SessionStoreError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The auth-sessions exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
