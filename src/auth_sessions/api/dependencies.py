"""FastAPI dependencies for the session API.

Everything is resolved from ``app.state``, which ``create_app`` fills explicitly.
"""

from fastapi import Depends, Request

from ..application import (
    CheckSessionActive,
    IssueRefreshToken,
    ListUserSessions,
    LoginUser,
    RevokeRefreshToken,
    RevokeUserSessions,
    RotateRefreshToken,
)
from ..config.settings import SessionSettings
from ..core.protocols import IdentityProvider, SessionStore
from ..utils.device import describe_device


def get_settings(request: Request) -> SessionSettings:
    return request.app.state.settings


def get_session_store(request: Request) -> SessionStore:
    store = getattr(request.app.state, "session_store", None)
    if store is None:
        raise RuntimeError("Session store not initialized. Call initialize_session_store() first.")
    return store


def get_identity_provider(request: Request) -> IdentityProvider:
    provider = getattr(request.app.state, "identity_provider", None)
    if provider is None:
        raise RuntimeError("Identity provider not configured. Pass one to create_app().")
    return provider


def get_device_info(request: Request) -> str:
    """Describe the calling device from its headers and peer address."""
    return describe_device(
        request.headers.get("user-agent"),
        request.headers.get("x-forwarded-for"),
        request.client.host if request.client else None,
    )


def get_issuer(
    store: SessionStore = Depends(get_session_store),
    settings: SessionSettings = Depends(get_settings),
) -> IssueRefreshToken:
    return IssueRefreshToken(store, max_attempts=settings.token_generation_attempts)


def get_login_command(
    provider: IdentityProvider = Depends(get_identity_provider),
    issuer: IssueRefreshToken = Depends(get_issuer),
) -> LoginUser:
    return LoginUser(provider, issuer)


def get_rotate_command(
    store: SessionStore = Depends(get_session_store),
    provider: IdentityProvider = Depends(get_identity_provider),
    issuer: IssueRefreshToken = Depends(get_issuer),
) -> RotateRefreshToken:
    return RotateRefreshToken(store, provider, issuer)


def get_revoke_command(store: SessionStore = Depends(get_session_store)) -> RevokeRefreshToken:
    return RevokeRefreshToken(store)


def get_revoke_all_command(store: SessionStore = Depends(get_session_store)) -> RevokeUserSessions:
    return RevokeUserSessions(store)


def get_list_sessions_query(store: SessionStore = Depends(get_session_store)) -> ListUserSessions:
    return ListUserSessions(store)


def get_check_session_query(store: SessionStore = Depends(get_session_store)) -> CheckSessionActive:
    return CheckSessionActive(store)
