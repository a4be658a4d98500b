"""In-memory TTL cache for order analytics snapshots."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from threading import Lock
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from src.core.config import Settings

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    """A cached value with an absolute expiry time."""

    value: Any
    expires_at: float

    def is_expired(self) -> bool:
        """Check if this entry has expired."""
        return time.time() >= self.expires_at


@dataclass
class AnalyticsCacheConfig:
    """Configuration for analytics caching."""

    ttl_seconds: int = 60
    cleanup_interval_seconds: int = 300

    @classmethod
    def from_settings(cls, settings: Settings) -> AnalyticsCacheConfig:
        """Create config from application settings."""
        return cls(
            ttl_seconds=settings.analytics_cache_ttl,
            cleanup_interval_seconds=settings.analytics_cache_cleanup_interval,
        )


class AnalyticsCache:
    """Thread-safe in-memory cache with per-entry TTL.

    Concurrent misses may each recompute and store a value; the last write wins.
    """

    def __init__(self, config: AnalyticsCacheConfig | None = None) -> None:
        """Initialize the analytics cache.

        Args:
            config: Optional cache configuration.
        """
        self.config = config or AnalyticsCacheConfig()
        self._cache: dict[str, CacheEntry] = {}
        self._lock = Lock()
        self._cleanup_task: asyncio.Task | None = None

    async def start_cleanup_task(self) -> None:
        """Start background cleanup task."""
        if self._cleanup_task is None:
            self._cleanup_task = asyncio.create_task(self._cleanup_loop())
            logger.info("Analytics cache cleanup task started")

    async def stop_cleanup_task(self) -> None:
        """Stop background cleanup task."""
        if self._cleanup_task:
            self._cleanup_task.cancel()
            try:
                await self._cleanup_task
            except asyncio.CancelledError:
                pass
            self._cleanup_task = None
            logger.info("Analytics cache cleanup task stopped")

    async def _cleanup_loop(self) -> None:
        while True:
            await asyncio.sleep(self.config.cleanup_interval_seconds)
            count = self.cleanup()
            if count > 0:
                logger.debug("Analytics cache cleaned up %d expired entries", count)

    def get(self, key: str) -> Any | None:
        """Get a cached value if present and not expired.

        Args:
            key: Cache key.

        Returns:
            The cached value, or None on a miss.
        """
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                logger.debug("Cache miss for key %s", key)
                return None

            if entry.is_expired():
                logger.debug("Cache expired for key %s", key)
                del self._cache[key]
                return None

            logger.debug("Cache hit for key %s", key)
            return entry.value

    def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        """Cache a value.

        Args:
            key: Cache key.
            value: Value to store.
            ttl_seconds: Lifetime override; defaults to the configured TTL.
        """
        ttl = self.config.ttl_seconds if ttl_seconds is None else ttl_seconds
        with self._lock:
            self._cache[key] = CacheEntry(value=value, expires_at=time.time() + ttl)
        logger.debug("Cached value for key %s (expires in %ds)", key, ttl)

    def cleanup(self) -> int:
        """Remove all expired entries.

        Returns:
            Number of entries removed.
        """
        with self._lock:
            expired_keys = [k for k, v in self._cache.items() if v.is_expired()]
            for key in expired_keys:
                del self._cache[key]
            return len(expired_keys)

    def clear(self) -> int:
        """Clear all cached entries.

        Returns:
            Number of entries cleared.
        """
        with self._lock:
            count = len(self._cache)
            self._cache.clear()
        logger.info("Cleared %d entries from analytics cache", count)
        return count
