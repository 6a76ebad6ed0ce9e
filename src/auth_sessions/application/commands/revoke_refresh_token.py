"""Revoke refresh token command (logout from one device)."""

import logging

from ...core.exceptions import NotFoundError, mask_token
from ...core.protocols import SessionStore

logger = logging.getLogger(__name__)


class RevokeRefreshToken:
    """Command to end a single session."""

    def __init__(self, session_store: SessionStore):
        self._session_store = session_store

    async def execute(self, token: str) -> None:
        """Delete the session behind ``token``.

        Raises:
            NotFoundError: If the token has no live session
        """
        if not await self._session_store.exists_by_token(token):
            logger.warning(f"Attempted to revoke non-existent token: {mask_token(token)}")
            raise NotFoundError("Refresh token not found or already revoked", token=token)

        await self._session_store.delete_by_token(token)
        logger.info(f"Revoked refresh token: {mask_token(token)}")
