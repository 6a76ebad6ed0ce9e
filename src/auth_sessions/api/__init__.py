"""FastAPI surface for the session service."""

from .app import create_app
from .exception_handlers import register_exception_handlers
from .routers import sessions_router

__all__ = ["create_app", "register_exception_handlers", "sessions_router"]
