"""Session store protocol contract."""

from typing import List, Optional, Protocol, runtime_checkable

from ..entities import RefreshToken


@runtime_checkable
class SessionStore(Protocol):
    """Protocol for refresh-token session storage.

    Defines ONLY the contract for session persistence.
    Implementations handle specific backends (Redis, memory).
    """

    async def create(
        self,
        token: str,
        user_id: int,
        username: str,
        device_info: Optional[str] = None,
    ) -> RefreshToken:
        """Store a new session.

        Raises:
            DuplicateTokenError: If the token already exists
            StorageUnavailableError: If the backend fails
        """
        ...

    async def find_by_token(self, token: str) -> Optional[RefreshToken]:
        """Return the live session for ``token`` or None."""
        ...

    async def find_by_user_id(self, user_id: int) -> List[RefreshToken]:
        """Return all live sessions of an account, in no particular order."""
        ...

    async def find_by_username(self, username: str) -> List[RefreshToken]:
        """Return all live sessions for a username, in no particular order."""
        ...

    async def exists_by_token(self, token: str) -> bool:
        """Check whether ``token`` has a live session."""
        ...

    async def touch(self, token: str) -> RefreshToken:
        """Mark the session as used now.

        Raises:
            NotFoundError: If the token is absent or expired
        """
        ...

    async def delete_by_token(self, token: str) -> None:
        """Remove one session; no-op if absent."""
        ...

    async def consume(self, token: str) -> Optional[RefreshToken]:
        """Remove the session and return it, or None if absent.

        Removal and read happen as one step: of several concurrent callers
        with the same token, only one receives the session.
        """
        ...

    async def delete_by_user_id(self, user_id: int) -> int:
        """Remove all sessions of an account and return how many were removed.

        Raises:
            PartialDeletionError: If only some sessions could be removed
        """
        ...

    async def delete_by_username(self, username: str) -> int:
        """Remove all sessions for a username and return how many were removed."""
        ...

    async def ping(self) -> bool:
        """Check backend reachability."""
        ...
