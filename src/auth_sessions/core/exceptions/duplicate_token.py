"""Refresh token collision exception."""

from .base import SessionStoreError, mask_token


class DuplicateTokenError(SessionStoreError):
    """Raised when a refresh token is created with a value that already exists.

    Callers are expected to generate a fresh token and try again.
    """

    def __init__(self, token: str):
        super().__init__(
            "Refresh token already exists",
            error_code="DUPLICATE_TOKEN",
            details={"token": mask_token(token)},
        )
        self.token = token
