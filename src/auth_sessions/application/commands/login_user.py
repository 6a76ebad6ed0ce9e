"""Login user command."""

import logging
from dataclasses import dataclass
from typing import Optional

from ...core.entities import AuthResult
from ...core.exceptions import AccountDisabledError
from ...core.protocols import IdentityProvider
from .issue_refresh_token import IssueRefreshToken, IssueRefreshTokenRequest

logger = logging.getLogger(__name__)


@dataclass
class LoginUserRequest:
    """Credentials plus the device the session is opened from."""

    username: str
    password: str
    device_info: Optional[str] = None


class LoginUser:
    """Command to authenticate a user and open a session."""

    def __init__(self, identity_provider: IdentityProvider, issuer: IssueRefreshToken):
        self._identity_provider = identity_provider
        self._issuer = issuer

    async def execute(self, request: LoginUserRequest) -> AuthResult:
        """Authenticate and return an access/refresh token pair.

        Raises:
            AuthenticationFailedError: If the credentials are rejected
            AccountDisabledError: If the account is disabled
        """
        identity = await self._identity_provider.authenticate(request.username, request.password)
        if not identity.is_active:
            raise AccountDisabledError(identity.username)

        access_token = await self._identity_provider.issue_access_token(identity)
        session = await self._issuer.execute(IssueRefreshTokenRequest(
            user_id=identity.user_id,
            username=identity.username,
            device_info=request.device_info,
        ))

        logger.info(f"User {identity.username} logged in from {session.device_info}")
        return AuthResult(
            access_token=access_token,
            refresh_token=session.token,
            identity=identity,
        )
