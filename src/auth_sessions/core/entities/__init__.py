"""Core session entities."""

from .refresh_token import RefreshToken, DEFAULT_TTL_SECONDS
from .user_identity import UserIdentity
from .auth_result import AuthResult

__all__ = ["RefreshToken", "DEFAULT_TTL_SECONDS", "UserIdentity", "AuthResult"]
