"""
Application factory for the session service.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from ..__version__ import __version__
from ..config.settings import SessionSettings, get_settings
from ..core.protocols import IdentityProvider, SessionStore
from ..infrastructure.factories import initialize_session_store, shutdown_session_store
from .exception_handlers import register_exception_handlers
from .routers import sessions_router

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[SessionSettings] = None,
    session_store: Optional[SessionStore] = None,
    identity_provider: Optional[IdentityProvider] = None,
    prefix: str = "/api/auth",
) -> FastAPI:
    """Create the FastAPI application.

    When no session store is given, a Redis store is built from settings on
    startup and closed on shutdown.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned_store = None
        if app.state.session_store is None:
            owned_store = await initialize_session_store(settings)
            app.state.session_store = owned_store
        try:
            yield
        finally:
            if owned_store is not None:
                await shutdown_session_store(owned_store)
                app.state.session_store = None

    app = FastAPI(title=settings.app_name, version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.session_store = session_store
    app.state.identity_provider = identity_provider

    register_exception_handlers(app)
    app.include_router(sessions_router, prefix=prefix)

    logger.debug(f"Session API mounted at {prefix}")
    return app
