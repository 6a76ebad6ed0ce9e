"""Session commands.

Write operations, each command handles exactly one session write operation.
"""

from .issue_refresh_token import IssueRefreshToken, IssueRefreshTokenRequest, generate_token
from .rotate_refresh_token import RotateRefreshToken
from .revoke_refresh_token import RevokeRefreshToken
from .revoke_user_sessions import RevokeUserSessions, RevokeUserSessionsRequest
from .login_user import LoginUser, LoginUserRequest

__all__ = [
    "IssueRefreshToken",
    "IssueRefreshTokenRequest",
    "generate_token",
    "RotateRefreshToken",
    "RevokeRefreshToken",
    "RevokeUserSessions",
    "RevokeUserSessionsRequest",
    "LoginUser",
    "LoginUserRequest",
]
