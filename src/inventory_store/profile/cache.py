"""
Profile document cache.

Bounded in-memory cache that keeps recently read profile documents so hot
files are not parsed again on every lookup.
"""

import time
from collections import OrderedDict
from threading import Lock
from typing import Any, Callable

from loguru import logger

from ..core.models import Document, ProfileKey


class ProfileCache:
    """
    Access-expiring profile cache

    Features:
    - Expiry measured from the last access (get or put), not from insertion
    - LRU eviction once ``max_entries`` is reached
    - Thread safe: a single Lock guards the map
    - Statistics: hits, misses, evictions, expirations
    """

    def __init__(
        self,
        max_entries: int = 1000,
        expire_after_access_seconds: float = 600,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            max_entries: Maximum number of cached documents
            expire_after_access_seconds: Idle time after which an entry expires
            clock: Time source in seconds
        """
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._max_entries = max_entries
        self._expire_after = expire_after_access_seconds
        self._clock = clock
        self._cache: OrderedDict[ProfileKey, tuple[Document, float]] = OrderedDict()
        self._lock = Lock()
        self._stats = {
            "hits": 0,
            "misses": 0,
            "evictions": 0,
            "expirations": 0,
        }

    def _is_expired(self, last_access: float, now: float) -> bool:
        return now - last_access >= self._expire_after

    def _evict_expired(self, now: float) -> None:
        """Drop expired entries (lock held)"""
        expired_keys = [
            key
            for key, (_, last_access) in self._cache.items()
            if self._is_expired(last_access, now)
        ]
        for key in expired_keys:
            del self._cache[key]
            self._stats["expirations"] += 1

    def _evict_lru(self) -> None:
        """Make room for one entry (lock held)"""
        while len(self._cache) >= self._max_entries:
            key, _ = self._cache.popitem(last=False)
            self._stats["evictions"] += 1
            logger.debug(f"[ProfileCache] Evicted {key}")

    def get(self, key: ProfileKey) -> Document | None:
        """
        Look up a cached document.

        A hit resets the entry's expiry clock.

        Returns:
            The cached document, or None if absent or expired
        """
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                self._stats["misses"] += 1
                return None

            document, last_access = entry
            now = self._clock()
            if self._is_expired(last_access, now):
                del self._cache[key]
                self._stats["expirations"] += 1
                self._stats["misses"] += 1
                return None

            self._cache[key] = (document, now)
            self._cache.move_to_end(key)
            self._stats["hits"] += 1
            return document

    def put(self, key: ProfileKey, document: Document) -> None:
        """Insert or replace the document for a key."""
        with self._lock:
            now = self._clock()
            self._evict_expired(now)

            if key not in self._cache:
                self._evict_lru()

            self._cache[key] = (document, now)
            self._cache.move_to_end(key)

    def invalidate(self, key: ProfileKey) -> bool:
        """
        Drop the entry for a key.

        Returns:
            Whether an entry was removed
        """
        with self._lock:
            return self._cache.pop(key, None) is not None

    def clear(self) -> int:
        """Drop every entry and return how many there were."""
        with self._lock:
            count = len(self._cache)
            self._cache.clear()
            return count

    def get_stats(self) -> dict[str, Any]:
        with self._lock:
            return {
                **self._stats,
                "size": len(self._cache),
                "max_entries": self._max_entries,
                "expire_after_access_seconds": self._expire_after,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def __contains__(self, key: ProfileKey) -> bool:
        """Membership check; does not touch the entry or the statistics."""
        with self._lock:
            entry = self._cache.get(key)
            return entry is not None and not self._is_expired(entry[1], self._clock())
