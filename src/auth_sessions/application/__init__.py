"""Session use cases with command/query separation."""

from .commands import (
    IssueRefreshToken,
    IssueRefreshTokenRequest,
    RotateRefreshToken,
    RevokeRefreshToken,
    RevokeUserSessions,
    RevokeUserSessionsRequest,
    LoginUser,
    LoginUserRequest,
)
from .queries import ListUserSessions, SessionSummary, CheckSessionActive

__all__ = [
    "IssueRefreshToken",
    "IssueRefreshTokenRequest",
    "RotateRefreshToken",
    "RevokeRefreshToken",
    "RevokeUserSessions",
    "RevokeUserSessionsRequest",
    "LoginUser",
    "LoginUserRequest",
    "ListUserSessions",
    "SessionSummary",
    "CheckSessionActive",
]
