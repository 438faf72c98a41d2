from .cache_entry import CacheEntry
from .news import News, NewsFilter, NewsPage

__all__ = [
    "CacheEntry",
    "News",
    "NewsFilter",
    "NewsPage",
]
