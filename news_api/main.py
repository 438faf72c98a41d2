"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from news_api.config import get_settings
from news_api.infrastructure.cache import CacheSweeper, InMemoryCacheStore
from news_api.infrastructure.database import Base, engine
from news_api.infrastructure.logging.log_config import setup_logging
from news_api.presentation.api.v1.router import router as v1_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — create tables, run the cache sweeper, drop the cache."""
    settings = get_settings()
    setup_logging()

    # 1. Create all database tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # 2. Optional sweeper for expired cache entries
    store: InMemoryCacheStore = app.state.cache_store
    sweeper: CacheSweeper | None = None
    if settings.cache_sweep_interval > 0:
        sweeper = CacheSweeper(store, interval=settings.cache_sweep_interval)
        await sweeper.start()

    yield

    # Shutdown
    if sweeper is not None:
        await sweeper.stop()
    store.clear()
    await engine.dispose()
    logger.info("News API shut down, cache cleared")


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # One cache store per application, handed to services via dependencies
    app.state.cache_store = InMemoryCacheStore(default_ttl=settings.cache_default_ttl)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(v1_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "news_api.main:app",
        host=_settings.host,
        port=_settings.port,
        reload=True,
    )
