"""Revoke user sessions command (logout from all devices)."""

import logging
from dataclasses import dataclass
from typing import Optional

from ...core.protocols import SessionStore

logger = logging.getLogger(__name__)


@dataclass
class RevokeUserSessionsRequest:
    """Request to end every session of an account, by id or by username."""

    user_id: Optional[int] = None
    username: Optional[str] = None

    def __post_init__(self):
        if (self.user_id is None) == (self.username is None):
            raise ValueError("Exactly one of user_id or username is required")


class RevokeUserSessions:
    """Command to end all sessions of a user."""

    def __init__(self, session_store: SessionStore):
        self._session_store = session_store

    async def execute(self, request: RevokeUserSessionsRequest) -> int:
        """Delete the sessions and return how many were removed.

        Raises:
            PartialDeletionError: If only some sessions could be removed
            StorageUnavailableError: If the store fails
        """
        if request.user_id is not None:
            return await self._session_store.delete_by_user_id(request.user_id)
        return await self._session_store.delete_by_username(request.username)
