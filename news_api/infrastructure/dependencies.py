"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.application.interfaces import CacheStore, NewsRepository
from news_api.application.services import NewsService
from news_api.config import get_settings
from news_api.infrastructure.database.repositories import SQLAlchemyNewsRepository
from news_api.infrastructure.database.session import get_db_session


def get_cache_store(request: Request) -> CacheStore:
    """Returns the process-wide cache store owned by the application."""
    return request.app.state.cache_store


async def get_news_repository(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[NewsRepository, None]:
    """Provides the SQLAlchemy news repository bound to the request session."""
    yield SQLAlchemyNewsRepository(session)


async def get_news_service(
    repository: NewsRepository = Depends(get_news_repository),
    cache: CacheStore = Depends(get_cache_store),
) -> AsyncGenerator[NewsService, None]:
    """Provides a NewsService wired to its repository and the shared cache."""
    settings = get_settings()
    yield NewsService(
        repository,
        cache,
        cache_ttl=settings.cache_default_ttl,
        default_limit=settings.default_page_size,
        max_limit=settings.max_page_size,
    )
