"""FastAPI application configuration module."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Internal imports
from ..config.environment import IS_PRODUCTION_ENVIRONMENT  # Environment must be imported first
from ..config.cors import CORS_CONFIG
from .. import __version__
from ..db import Database, EventStore, get_database
from ..export import ExportFailed
from ..media import UploadFailed
from ..models.event import ValidationFailed
from ..notifications import NotificationCenter
from ..repository import EventRepository, RepositoryNotReady
from ..taxonomy import TaxonomyRegistry
from ..utils.logging_config import setup_logging
from .routes import (
    categories,
    dashboard,
    events,
    health,
    media,
    notifications,
    reports,
    session
)

# Set up logging
setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    database = app.state.database or get_database()
    repository = EventRepository(EventStore(database), app.state.notifications)
    repository.load()
    app.state.repository = repository
    logger.info(f"Event repository ready with {len(repository.events)} events")
    yield
    # Shutdown
    repository.close()
    logger.info("Event repository closed")

def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationFailed)
    async def validation_failed(request: Request, exc: ValidationFailed):
        return JSONResponse(status_code=422, content={"detail": str(exc), "fields": exc.fields})

    @app.exception_handler(ExportFailed)
    async def export_failed(request: Request, exc: ExportFailed):
        logger.error(f"Report export failed: {exc}")
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.exception_handler(UploadFailed)
    async def upload_failed(request: Request, exc: UploadFailed):
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    @app.exception_handler(RepositoryNotReady)
    async def repository_not_ready(request: Request, exc: RepositoryNotReady):
        return JSONResponse(status_code=503, content={"detail": str(exc)})

def create_application(
    database: Optional[Database] = None,
    registry: Optional[TaxonomyRegistry] = None,
    notification_center: Optional[NotificationCenter] = None
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        database: Database to persist events in (defaults to the environment configuration)
        registry: Category registry (a fresh default registry if omitted)
        notification_center: Where mutation outcomes are reported

    Returns:
        FastAPI: The configured application; the repository is loaded on startup
    """
    app = FastAPI(
        title="College Event Records API",
        description="API for recording college events, browsing them and exporting reports",
        version=__version__,
        docs_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/docs',
        redoc_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/redoc',
        lifespan=lifespan
    )
    app.state.database = database
    app.state.registry = registry or TaxonomyRegistry()
    app.state.notifications = notification_center or NotificationCenter()

    # Configure CORS
    app.add_middleware(CORSMiddleware, **CORS_CONFIG)
    _register_error_handlers(app)

    # Include health check router without prefix
    app.include_router(health.router)

    # Include routers with prefix
    app.include_router(session.router, prefix="/api")
    app.include_router(events.router, prefix="/api")
    app.include_router(categories.router, prefix="/api")
    app.include_router(dashboard.router, prefix="/api")
    app.include_router(reports.router, prefix="/api")
    app.include_router(media.router, prefix="/api")
    app.include_router(notifications.router, prefix="/api")

    return app

# Create the application instance
app = create_application()
