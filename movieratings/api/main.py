"""
FastAPI application entry point for the JSON:API Movie Ratings service.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movieratings import __version__
from movieratings.api.config import Settings
from movieratings.api.errors import register_exception_handlers
from movieratings.api.middleware import JsonApiMiddleware
from movieratings.api.responses import JsonApiResponse
from movieratings.api.routers import movies, movieratings, usermovieratings, system
from movieratings.database.connection import DatabaseManager

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    db_manager: Optional[DatabaseManager] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Runtime configuration (read from the environment when omitted)
        db_manager: Database manager to use (built from settings when omitted)

    Returns:
        Configured FastAPI application
    """
    settings = settings or Settings.from_env()
    db_manager = db_manager or DatabaseManager(settings.database_url, echo=settings.sql_echo)

    app = FastAPI(
        title="Movie Ratings JSON:API",
        description="JSON:API endpoints for movies, movie ratings and per-user movie ratings",
        version=__version__,
        default_response_class=JsonApiResponse,
    )
    app.state.settings = settings
    app.state.db_manager = db_manager

    # Added first so CORS (outermost) answers preflight requests before negotiation
    app.add_middleware(JsonApiMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(movies.router)
    app.include_router(movieratings.router)
    app.include_router(usermovieratings.router)
    app.include_router(system.router)

    logger.info("Application created (database: %s)", db_manager.engine.url.render_as_string(hide_password=True))
    return app


def run() -> None:
    """Configure logging and serve the application with uvicorn."""
    import uvicorn

    from movieratings.utils.logging_config import setup_logging

    settings = Settings.from_env()
    setup_logging(log_file=settings.log_file, level=settings.log_level)
    uvicorn.run(create_app(settings), host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
