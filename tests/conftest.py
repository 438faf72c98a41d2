"""Shared test fixtures — in-memory fakes for the persistence port and the clock."""

from typing import Any

import pytest

from news_api.application.interfaces import NewsRepository
from news_api.application.services import NewsService
from news_api.domain.entities import News, NewsFilter
from news_api.infrastructure.cache import InMemoryCacheStore


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeNewsRepository(NewsRepository):
    """In-memory fake repository that records how often listings hit it."""

    def __init__(self):
        self._news: dict[int, News] = {}
        self._next_id = 1
        self.find_page_calls = 0
        self.fail_with: Exception | None = None

    async def find_page(
        self, offset: int, limit: int, news_filter: NewsFilter
    ) -> tuple[list[News], int]:
        self.find_page_calls += 1
        if self.fail_with is not None:
            raise self.fail_with
        matches = [n for n in self._news.values() if self._matches(n, news_filter)]
        matches.sort(key=lambda n: n.id, reverse=True)
        return matches[offset : offset + limit], len(matches)

    async def get_by_id(self, news_id: int) -> News | None:
        return self._news.get(news_id)

    async def insert(self, news: News) -> News:
        news.id = self._next_id
        self._next_id += 1
        self._news[news.id] = news
        return news

    async def update_by_id(self, news_id: int, patch: dict[str, Any]) -> News | None:
        news = self._news.get(news_id)
        if news is None:
            return None
        news.update(**patch)
        return news

    async def delete_by_id(self, news_id: int) -> bool:
        return self._news.pop(news_id, None) is not None

    @staticmethod
    def _matches(news: News, news_filter: NewsFilter) -> bool:
        if news_filter.search is not None:
            needle = news_filter.search.lower()
            if needle not in news.title.lower() and needle not in news.content.lower():
                return False
        if news_filter.author is not None and news.author != news_filter.author:
            return False
        if news_filter.category is not None and news.category != news_filter.category:
            return False
        return True


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache_store(clock: FakeClock) -> InMemoryCacheStore:
    return InMemoryCacheStore(default_ttl=300, clock=clock)


@pytest.fixture
def news_repository() -> FakeNewsRepository:
    return FakeNewsRepository()


@pytest.fixture
def news_service(news_repository: FakeNewsRepository, cache_store: InMemoryCacheStore) -> NewsService:
    return NewsService(news_repository, cache_store)
