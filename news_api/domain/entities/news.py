"""Domain entities — pure Python business objects, no framework dependencies."""

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass
class News:
    """Core domain entity representing a news article."""

    title: str
    content: str
    author: str | None = None
    category: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, **changes: Any) -> None:
        """Apply a partial update and refresh the updated_at timestamp."""
        for name, value in changes.items():
            if name in ("id", "created_at", "updated_at"):
                continue
            setattr(self, name, value)
        self.updated_at = datetime.now(timezone.utc)


@dataclass(frozen=True)
class NewsFilter:
    """Listing filters. ``None`` means the filter is not applied."""

    search: str | None = None
    author: str | None = None
    category: str | None = None


@dataclass(frozen=True)
class NewsPage:
    """One page of news plus pagination metadata."""

    data: list[News]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0
