from .cache_store import CacheStore
from .news_repository import NewsRepository

__all__ = [
    "CacheStore",
    "NewsRepository",
]
