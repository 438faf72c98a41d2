"""Cache sweeper — optional asyncio daemon that reclaims expired cache entries."""

import asyncio
import logging

from news_api.infrastructure.cache.in_memory_cache_store import InMemoryCacheStore

logger = logging.getLogger(__name__)


class CacheSweeper:
    """Periodically calls ``purge_expired`` on a cache store.

    Runs as an asyncio.Task inside FastAPI's lifespan. Reads already skip
    expired entries, so the sweeper only bounds memory held by keys that are
    never requested again.
    """

    def __init__(self, store: InMemoryCacheStore, interval: float) -> None:
        self._store = store
        self._interval = interval
        self._running = False
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._running

    async def start(self) -> None:
        """Start the sweep loop."""
        self._running = True
        self._task = asyncio.create_task(self._loop())
        logger.info("CacheSweeper started (interval=%ss)", self._interval)

    async def stop(self) -> None:
        """Stop the sweep loop and wait for it to exit."""
        self._running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
        logger.info("CacheSweeper stopped")

    def sweep(self) -> int:
        removed = self._store.purge_expired()
        if removed:
            logger.debug("CacheSweeper purged %d expired entries", removed)
        return removed

    async def _loop(self) -> None:
        while self._running:
            await asyncio.sleep(self._interval)
            try:
                self.sweep()
            except Exception:
                logger.exception("CacheSweeper error")
