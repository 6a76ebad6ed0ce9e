"""
Session API endpoints: login, token refresh, logout and session listing.
"""
import logging

from fastapi import APIRouter, Depends, status

from ...application import (
    CheckSessionActive,
    ListUserSessions,
    LoginUser,
    LoginUserRequest,
    RevokeRefreshToken,
    RevokeUserSessions,
    RevokeUserSessionsRequest,
    RotateRefreshToken,
)
from ...config.settings import SessionSettings
from ..dependencies import (
    get_check_session_query,
    get_device_info,
    get_list_sessions_query,
    get_login_command,
    get_revoke_all_command,
    get_revoke_command,
    get_rotate_command,
    get_settings,
)
from ..models import (
    AuthResponse,
    HealthResponse,
    LoginRequest,
    LogoutAllRequest,
    LogoutAllResponse,
    LogoutRequest,
    MessageResponse,
    RefreshTokenRequest,
    SessionInfo,
    SessionsResponse,
    SessionStatusResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])


@router.post(
    "/login",
    response_model=AuthResponse,
    status_code=status.HTTP_200_OK,
    summary="User Login",
    description="Authenticate user with username and password"
)
async def login(
    request: LoginRequest,
    device_info: str = Depends(get_device_info),
    command: LoginUser = Depends(get_login_command),
) -> AuthResponse:
    result = await command.execute(LoginUserRequest(
        username=request.username,
        password=request.password,
        device_info=device_info,
    ))
    return AuthResponse.from_result(result)


@router.post(
    "/refresh",
    response_model=AuthResponse,
    status_code=status.HTTP_200_OK,
    summary="Refresh Access Token",
    description="Exchange a refresh token for a new access/refresh token pair"
)
async def refresh_token(
    request: RefreshTokenRequest,
    command: RotateRefreshToken = Depends(get_rotate_command),
) -> AuthResponse:
    result = await command.execute(request.refresh_token)
    return AuthResponse.from_result(result)


@router.post(
    "/logout",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Logout",
    description="Revoke a specific refresh token (logout from current device)"
)
async def logout(
    request: LogoutRequest,
    command: RevokeRefreshToken = Depends(get_revoke_command),
) -> MessageResponse:
    await command.execute(request.refresh_token)
    return MessageResponse(message="Successfully logged out")


@router.post(
    "/logout-all",
    response_model=LogoutAllResponse,
    status_code=status.HTTP_200_OK,
    summary="Logout All Devices",
    description="Revoke all refresh tokens for a user (logout from all devices)"
)
async def logout_all(
    request: LogoutAllRequest,
    command: RevokeUserSessions = Depends(get_revoke_all_command),
) -> LogoutAllResponse:
    revoked = await command.execute(RevokeUserSessionsRequest(user_id=request.user_id))
    return LogoutAllResponse(message="Successfully logged out from all devices", revoked=revoked)


@router.get(
    "/sessions/{user_id}",
    response_model=SessionsResponse,
    status_code=status.HTTP_200_OK,
    summary="Get Active Sessions",
    description="Get all active sessions for a user"
)
async def get_active_sessions(
    user_id: int,
    query: ListUserSessions = Depends(get_list_sessions_query),
) -> SessionsResponse:
    summaries = await query.execute(user_id)
    return SessionsResponse(sessions=[SessionInfo.from_summary(s) for s in summaries])


@router.post(
    "/sessions/check",
    response_model=SessionStatusResponse,
    status_code=status.HTTP_200_OK,
    summary="Check Session",
    description="Check whether a refresh token still has a live session"
)
async def check_session(
    request: RefreshTokenRequest,
    query: CheckSessionActive = Depends(get_check_session_query),
) -> SessionStatusResponse:
    return SessionStatusResponse(active=await query.execute(request.refresh_token))


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health Check",
    description="Check if the session service is running"
)
async def health(settings: SessionSettings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(status="UP", service=settings.app_name)
