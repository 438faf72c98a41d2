"""Cache port consumed by application services."""

from abc import ABC, abstractmethod
from typing import Any


class CacheStore(ABC):
    """Key/value store with per-entry TTL and prefix invalidation.

    All operations are total: a missing or expired key reads as ``None``,
    deleting a missing key is a no-op.
    """

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the value for ``key`` unless it is absent or expired."""
        ...

    @abstractmethod
    def set(self, key: str, value: Any, ttl_seconds: float | None = None) -> None:
        """Store ``value`` under ``key``, replacing any previous entry."""
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key`` if present."""
        ...

    @abstractmethod
    def invalidate_by_prefix(self, prefix: str) -> int:
        """Remove every entry whose key starts with ``prefix``; return the count."""
        ...
