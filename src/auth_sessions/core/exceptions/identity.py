"""Identity provider exceptions."""

from typing import Optional

from .base import SessionStoreError


class AuthenticationFailedError(SessionStoreError):
    """Raised by identity providers when credentials are rejected."""

    def __init__(self, message: str = "Invalid credentials", *, username: Optional[str] = None):
        super().__init__(
            message,
            error_code="AUTHENTICATION_FAILED",
            details={"username": username} if username else {},
        )


class AccountDisabledError(SessionStoreError):
    """Raised when a disabled account tries to log in or refresh."""

    def __init__(self, username: str):
        super().__init__(
            "User account is disabled",
            error_code="ACCOUNT_DISABLED",
            details={"username": username},
        )
