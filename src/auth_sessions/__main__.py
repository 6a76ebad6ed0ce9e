"""Run the session API with uvicorn: ``python -m auth_sessions``."""

import logging

import uvicorn

from .api import create_app
from .config import get_settings, setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the application."""
    settings = get_settings()
    setup_logging(settings)

    logger.info(f"Starting {settings.app_name} ({settings.environment}) on {settings.host}:{settings.port}")
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
        access_log=True,
    )


if __name__ == "__main__":
    main()
