"""
Configuration management for auth-sessions.

Settings are read from environment variables and an optional ``.env`` file.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, RedisDsn, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.entities import DEFAULT_TTL_SECONDS
from ..core.value_objects import ExpiryPolicy


class SessionSettings(BaseSettings):
    """Settings for the refresh-token session store and its HTTP surface."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Core Application Settings
    app_name: str = Field(default="auth-sessions")
    environment: str = Field(default="development")

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Redis Configuration
    redis_url: RedisDsn = Field(default="redis://localhost:6379/0")
    redis_password: Optional[SecretStr] = Field(default=None)
    redis_socket_timeout: float = Field(default=5.0, gt=0)
    redis_decode_responses: bool = Field(default=True)

    # Session Configuration
    session_key_prefix: str = Field(default="refresh_tokens", min_length=1)
    refresh_token_ttl_seconds: int = Field(default=DEFAULT_TTL_SECONDS, gt=0)
    session_expiry_policy: ExpiryPolicy = Field(default=ExpiryPolicy.SLIDING)
    token_generation_attempts: int = Field(default=3, ge=1)

    # Logging Configuration
    log_level: str = Field(default="INFO")
    log_verbosity: str = Field(default="NORMAL")
    log_format: str = Field(default="simple")

    @field_validator("session_expiry_policy", mode="before")
    @classmethod
    def _normalize_policy(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value


@lru_cache()
def get_settings() -> SessionSettings:
    """Get cached settings instance."""
    return SessionSettings()
