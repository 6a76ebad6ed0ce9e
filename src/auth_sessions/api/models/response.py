"""Session API response models."""

from datetime import datetime
from typing import List, Optional, Set

from pydantic import Field

from ...application.queries import SessionSummary
from ...core.entities import AuthResult
from .request import CamelModel


class AuthResponse(CamelModel):
    """Token pair and identity returned by login and refresh."""

    access_token: str = Field(..., description="Short-lived access token")
    refresh_token: str = Field(..., description="Opaque refresh token")
    token_type: str = Field(default="Bearer", description="Token type")
    user_id: int = Field(..., description="User ID")
    username: str = Field(..., description="Username")
    email: Optional[str] = Field(None, description="Email address")
    roles: Set[str] = Field(default_factory=set, description="User roles")

    @classmethod
    def from_result(cls, result: AuthResult) -> "AuthResponse":
        identity = result.identity
        return cls(
            access_token=result.access_token,
            refresh_token=result.refresh_token,
            token_type=result.token_type,
            user_id=identity.user_id,
            username=identity.username,
            email=identity.email,
            roles=set(identity.roles),
        )


class MessageResponse(CamelModel):
    """Plain confirmation message."""

    message: str = Field(..., description="Outcome message")


class LogoutAllResponse(MessageResponse):
    """Confirmation of an all-devices logout."""

    revoked: int = Field(..., description="Number of sessions revoked")


class SessionInfo(CamelModel):
    """One active session of a user."""

    token: str = Field(..., description="Refresh token of the session")
    device_info: Optional[str] = Field(None, description="Device descriptor")
    created_at: datetime = Field(..., description="Session creation time")
    last_used: datetime = Field(..., description="Last refresh time")

    @classmethod
    def from_summary(cls, summary: SessionSummary) -> "SessionInfo":
        return cls(
            token=summary.token,
            device_info=summary.device_info,
            created_at=summary.created_at,
            last_used=summary.last_used_at,
        )


class SessionsResponse(CamelModel):
    """Active sessions of a user."""

    sessions: List[SessionInfo] = Field(default_factory=list)


class HealthResponse(CamelModel):
    """Service health."""

    status: str = Field(default="UP")
    service: str = Field(...)


class SessionStatusResponse(CamelModel):
    """Whether a refresh token is live."""

    active: bool = Field(..., description="True if the session exists and has not expired")
