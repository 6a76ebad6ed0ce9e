"""Identity provider protocol contract."""

from typing import Protocol, runtime_checkable

from ..entities import UserIdentity


@runtime_checkable
class IdentityProvider(Protocol):
    """Protocol for the external identity layer.

    Password hashing and access-token signing live behind this contract;
    the session library only persists the refresh-token half.
    """

    async def authenticate(self, username: str, password: str) -> UserIdentity:
        """Verify credentials.

        Raises:
            AuthenticationFailedError: If the credentials are rejected
        """
        ...

    async def get_user(self, username: str) -> UserIdentity:
        """Load the current identity of an account.

        Raises:
            AuthenticationFailedError: If the account no longer exists
        """
        ...

    async def issue_access_token(self, identity: UserIdentity) -> str:
        """Issue a short-lived access token for ``identity``."""
        ...
