"""Missing session exceptions."""

from typing import Optional

from .base import SessionStoreError, mask_token


class NotFoundError(SessionStoreError):
    """Raised when an operation references a session with no live record.

    The record either never existed or has expired.
    """

    def __init__(self, message: str = "Refresh token not found", *, token: Optional[str] = None):
        super().__init__(
            message,
            error_code="SESSION_NOT_FOUND",
            details={"token": mask_token(token)} if token else {},
        )
        self.token = token


class InvalidRefreshTokenError(NotFoundError):
    """Raised when a refresh is attempted with an unknown or expired token."""

    def __init__(self, token: Optional[str] = None):
        super().__init__("Invalid refresh token", token=token)
        self.error_code = "INVALID_REFRESH_TOKEN"
