"""Configuration for auth-sessions."""

from .settings import SessionSettings, get_settings
from .logging_config import LoggingConfig, LogFormat, LogLevel, LogVerbosity, setup_logging

__all__ = [
    "SessionSettings",
    "get_settings",
    "LoggingConfig",
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
    "setup_logging",
]
