"""FastAPI application with canonical path redirects."""

import logging

from cleanpath_core import Settings, get_settings
from fastapi import FastAPI

from app.middleware import CleanPathMiddleware
from app.routes import health

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Slash redirects from the router would undo canonical trailing slashes
    app = FastAPI(
        title="CleanPath API",
        description="Redirects requests to their canonical path",
        version="0.1.0",
        debug=settings.debug,
        redirect_slashes=False,
    )

    if settings.clean_path_enabled:
        app.add_middleware(
            CleanPathMiddleware,
            enabled=True,
            redirect_status=settings.clean_path_redirect_status,
            absolute=settings.clean_path_absolute_redirects,
        )
    else:
        logger.info("Path canonicalization disabled (CLEAN_PATH_ENABLED=false)")

    # Include API routes
    app.include_router(health.router, prefix="/api")

    return app


app = create_app()
