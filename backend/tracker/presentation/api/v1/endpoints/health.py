"""Health check endpoint: no dependencies, always available."""

from fastapi import APIRouter, Request

from tracker.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(request: Request) -> dict:
    """Returns the current application health status and the active store."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "store": type(request.app.state.row_store).__name__,
    }
