"""
Exception handlers mapping session errors to HTTP responses.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.exceptions import SessionStoreError, create_error_response, get_http_status_code

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers for the application.

    Args:
        app: FastAPI application instance
    """
    @app.exception_handler(SessionStoreError)
    async def session_error_handler(request: Request, exc: SessionStoreError):
        """Handle session-specific exceptions."""
        status_code = get_http_status_code(exc)
        if status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        else:
            logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
        return JSONResponse(status_code=status_code, content=create_error_response(exc))
