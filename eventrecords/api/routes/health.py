"""Health check routes for the FastAPI application."""

from fastapi import APIRouter, Depends

from ... import __version__
from ...config.environment import IS_PRODUCTION_ENVIRONMENT
from ...repository import EventRepository
from ..dependencies import get_repository

router = APIRouter(tags=["health"])

@router.get("/")
async def health_check(repository: EventRepository = Depends(get_repository)):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "environment": "production" if IS_PRODUCTION_ENVIRONMENT else "development",
        "repository": repository.state.value,
        "version": __version__
    }
