"""Rotate refresh token command."""

import logging

from ...core.entities import AuthResult
from ...core.exceptions import AccountDisabledError, InvalidRefreshTokenError, NotFoundError
from ...core.protocols import IdentityProvider, SessionStore
from .issue_refresh_token import IssueRefreshToken, IssueRefreshTokenRequest

logger = logging.getLogger(__name__)


class RotateRefreshToken:
    """Command to exchange a refresh token for a new token pair.

    The presented refresh token is single use: it is revoked and replaced by a
    new one bound to the same device.
    """

    def __init__(
        self,
        session_store: SessionStore,
        identity_provider: IdentityProvider,
        issuer: IssueRefreshToken,
    ):
        self._session_store = session_store
        self._identity_provider = identity_provider
        self._issuer = issuer

    async def execute(self, refresh_token: str) -> AuthResult:
        """Validate ``refresh_token`` and issue a fresh pair.

        Raises:
            InvalidRefreshTokenError: If the token has no live session
            AccountDisabledError: If the account was disabled meanwhile
            StorageUnavailableError: If the store fails
        """
        try:
            session = await self._session_store.touch(refresh_token)
        except NotFoundError:
            logger.warning("Invalid refresh token provided")
            raise InvalidRefreshTokenError(refresh_token)

        identity = await self._identity_provider.get_user(session.username)
        if not identity.is_active:
            raise AccountDisabledError(identity.username)

        access_token = await self._identity_provider.issue_access_token(identity)

        # Only the caller that removes the old token gets a replacement.
        if await self._session_store.consume(refresh_token) is None:
            logger.warning("Refresh token was already used by a concurrent refresh")
            raise InvalidRefreshTokenError(refresh_token)

        replacement = await self._issuer.execute(IssueRefreshTokenRequest(
            user_id=session.user_id,
            username=session.username,
            device_info=session.device_info,
        ))

        logger.debug(f"Rotated refresh token for user: {session.username}")
        return AuthResult(
            access_token=access_token,
            refresh_token=replacement.token,
            identity=identity,
        )
