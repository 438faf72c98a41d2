from .cache_sweeper import CacheSweeper
from .in_memory_cache_store import CacheStats, InMemoryCacheStore

__all__ = [
    "CacheStats",
    "CacheSweeper",
    "InMemoryCacheStore",
]
