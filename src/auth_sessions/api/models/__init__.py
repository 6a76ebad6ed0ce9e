"""Session API models."""

from .request import CamelModel, LoginRequest, RefreshTokenRequest, LogoutRequest, LogoutAllRequest
from .response import (
    AuthResponse,
    MessageResponse,
    LogoutAllResponse,
    SessionInfo,
    SessionsResponse,
    HealthResponse,
    SessionStatusResponse,
)

__all__ = [
    "CamelModel",
    "LoginRequest",
    "RefreshTokenRequest",
    "LogoutRequest",
    "LogoutAllRequest",
    "AuthResponse",
    "MessageResponse",
    "LogoutAllResponse",
    "SessionInfo",
    "SessionsResponse",
    "HealthResponse",
    "SessionStatusResponse",
]
