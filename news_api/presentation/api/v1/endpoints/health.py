"""Health check endpoint — no database dependency, always available."""

from fastapi import APIRouter, Request

from news_api.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(request: Request) -> dict:
    """Returns the current application health status and cache counters."""
    settings = get_settings()
    stats = request.app.state.cache_store.stats()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "cache": {
            "entries": stats.size,
            "hits": stats.hits,
            "misses": stats.misses,
        },
    }
