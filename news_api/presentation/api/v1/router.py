"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from news_api.presentation.api.v1.endpoints.health import router as health_router
from news_api.presentation.api.v1.endpoints.news import router as news_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(news_router)
