"""Application service (use case) for News operations."""

import logging

from news_api.application.interfaces import CacheStore, NewsRepository
from news_api.application.schemas import NewsCreate, NewsUpdate
from news_api.application.services.cache_keys import generate_key
from news_api.domain.entities import News, NewsFilter, NewsPage
from news_api.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

NEWS_CACHE_PREFIX = "news:"

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
# Keeps (page - 1) * limit inside a signed 64-bit database offset
MAX_PAGE = 1_000_000_000


def _clean(value: str | None) -> str | None:
    """Strip a filter string; blank means the filter is absent."""
    if value is None:
        return None
    value = value.strip()
    return value or None


class NewsService:
    """Orchestrates news business logic with a read-through listing cache.

    Listings are served from the cache when possible. Every committed
    mutation drops the whole ``news:`` key space so no query variant can
    serve a stale page.
    """

    def __init__(
        self,
        repository: NewsRepository,
        cache: CacheStore,
        *,
        cache_ttl: float | None = None,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ):
        self._repository = repository
        self._cache = cache
        self._cache_ttl = cache_ttl
        self._default_limit = default_limit
        self._max_limit = max_limit

    def normalize_pagination(self, page: int | None, limit: int | None) -> tuple[int, int]:
        """Apply defaults and clamp ``1 <= page <= MAX_PAGE`` and ``1 <= limit <= max_limit``."""
        page = DEFAULT_PAGE if page is None else min(max(page, 1), MAX_PAGE)
        limit = self._default_limit if limit is None else min(max(limit, 1), self._max_limit)
        return page, limit

    async def list_news(
        self,
        *,
        page: int | None = None,
        limit: int | None = None,
        search: str | None = None,
        author: str | None = None,
        category: str | None = None,
    ) -> NewsPage:
        page, limit = self.normalize_pagination(page, limit)
        news_filter = NewsFilter(
            search=_clean(search),
            author=_clean(author),
            category=_clean(category),
        )
        key = generate_key(
            NEWS_CACHE_PREFIX,
            {
                "page": page,
                "limit": limit,
                "search": news_filter.search,
                "author": news_filter.author,
                "category": news_filter.category,
            },
        )

        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("News listing cache hit: %s", key)
            return cached

        logger.debug("News listing cache miss: %s", key)
        records, total = await self._repository.find_page(
            offset=(page - 1) * limit, limit=limit, news_filter=news_filter
        )
        result = NewsPage(data=records, total=total, page=page, limit=limit)
        self._cache.set(key, result, self._cache_ttl)
        return result

    async def get_news(self, news_id: int) -> News:
        news = await self._repository.get_by_id(news_id)
        if news is None:
            raise EntityNotFoundError("News", news_id)
        return news

    async def create_news(self, data: NewsCreate) -> News:
        news = News(
            title=data.title,
            content=data.content,
            author=data.author,
            category=data.category,
        )
        created = await self._repository.insert(news)
        self._invalidate_listings()
        return created

    async def update_news(self, news_id: int, data: NewsUpdate) -> News:
        patch = data.model_dump(exclude_unset=True)
        updated = await self._repository.update_by_id(news_id, patch)
        if updated is None:
            raise EntityNotFoundError("News", news_id)
        self._invalidate_listings()
        return updated

    async def delete_news(self, news_id: int) -> None:
        deleted = await self._repository.delete_by_id(news_id)
        if not deleted:
            raise EntityNotFoundError("News", news_id)
        self._invalidate_listings()

    def _invalidate_listings(self) -> None:
        removed = self._cache.invalidate_by_prefix(NEWS_CACHE_PREFIX)
        logger.info("Invalidated %d cached news listing(s)", removed)
