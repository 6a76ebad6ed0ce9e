"""Issue refresh token command."""

import logging
import secrets
from dataclasses import dataclass
from typing import Callable, Optional

from ...core.entities import RefreshToken
from ...core.exceptions import DuplicateTokenError
from ...core.protocols import SessionStore
from ...utils.device import UNKNOWN_DEVICE

logger = logging.getLogger(__name__)


def generate_token() -> str:
    """Generate an opaque, URL-safe refresh token with 256 bits of entropy."""
    return secrets.token_urlsafe(32)


@dataclass
class IssueRefreshTokenRequest:
    """Request to open a new session for a user."""

    user_id: int
    username: str
    device_info: Optional[str] = None


class IssueRefreshToken:
    """Command to create a refresh-token session.

    Handles ONLY token generation and storage, regenerating on collision.
    """

    def __init__(
        self,
        session_store: SessionStore,
        max_attempts: int = 3,
        token_generator: Callable[[], str] = generate_token,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._session_store = session_store
        self._max_attempts = max_attempts
        self._token_generator = token_generator

    async def execute(self, request: IssueRefreshTokenRequest) -> RefreshToken:
        """Store a new session and return it.

        Raises:
            DuplicateTokenError: If every generated token collided
            StorageUnavailableError: If the store fails
        """
        device_info = request.device_info or UNKNOWN_DEVICE

        for attempt in range(1, self._max_attempts + 1):
            token = self._token_generator()
            try:
                session = await self._session_store.create(
                    token, request.user_id, request.username, device_info
                )
            except DuplicateTokenError:
                logger.warning(f"Refresh token collision on attempt {attempt}/{self._max_attempts}")
                if attempt == self._max_attempts:
                    raise
                continue

            logger.info(f"Created refresh token for user: {request.username}")
            return session
