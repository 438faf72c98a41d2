from .cache_keys import generate_key
from .news_service import MAX_PAGE, NEWS_CACHE_PREFIX, NewsService

__all__ = [
    "generate_key",
    "MAX_PAGE",
    "NEWS_CACHE_PREFIX",
    "NewsService",
]
