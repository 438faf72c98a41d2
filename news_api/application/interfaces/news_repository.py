"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod
from typing import Any

from news_api.domain.entities import News, NewsFilter


class NewsRepository(ABC):
    """Port for news persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def find_page(
        self, offset: int, limit: int, news_filter: NewsFilter
    ) -> tuple[list[News], int]:
        """Return one page of matching news and the total number of matches."""
        ...

    @abstractmethod
    async def get_by_id(self, news_id: int) -> News | None:
        """Retrieve a single news article by its ID."""
        ...

    @abstractmethod
    async def insert(self, news: News) -> News:
        """Persist a new news article and return it with the generated ID."""
        ...

    @abstractmethod
    async def update_by_id(self, news_id: int, patch: dict[str, Any]) -> News | None:
        """Apply a partial update. Returns None if the article does not exist."""
        ...

    @abstractmethod
    async def delete_by_id(self, news_id: int) -> bool:
        """Delete a news article. Returns True if deleted, False if not found."""
        ...
