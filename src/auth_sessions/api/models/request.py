"""Session API request models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exchanging camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoginRequest(CamelModel):
    """Login credentials."""

    username: str = Field(..., min_length=1, description="Username")
    password: str = Field(..., min_length=1, description="Password")


class RefreshTokenRequest(CamelModel):
    """Refresh token exchange request."""

    refresh_token: str = Field(..., min_length=1, description="Refresh token to exchange")


class LogoutRequest(CamelModel):
    """Single-device logout request."""

    refresh_token: str = Field(..., min_length=1, description="Refresh token to revoke")


class LogoutAllRequest(CamelModel):
    """All-devices logout request."""

    user_id: int = Field(..., description="User ID whose sessions are revoked")
