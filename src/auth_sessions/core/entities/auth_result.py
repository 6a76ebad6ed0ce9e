"""Outcome of a login or token refresh."""

from dataclasses import dataclass

from .user_identity import UserIdentity


@dataclass(frozen=True)
class AuthResult:
    """Access/refresh token pair issued for an identity."""

    access_token: str
    refresh_token: str
    identity: UserIdentity
    token_type: str = "Bearer"
