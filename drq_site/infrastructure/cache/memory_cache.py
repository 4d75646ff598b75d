"""In-process result cache with per-entry TTL.

Process-local key/value store used to avoid recomputing search results and
service-area lookups within a TTL window. Not shared across processes and
not persisted across restarts; staleness is bounded by the TTL.

Expiry is lazy (checked on read). When the application is configured with a
sweep interval, run_periodic_sweep removes expired entries in the background
as well; both modes can be active at once and lazy expiry always governs
what a reader sees.
"""

from __future__ import annotations

import asyncio
import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING = object()


@dataclass
class CacheEntry:
    """Cached value with absolute expiry (clock seconds)."""

    value: Any
    expires_at: float
    namespace: str | None = None


class ResultCache:
    """Thread-safe in-memory cache with lazy expiry.

    The backing dict is guarded by a lock for every read-check-write step.
    compute() runs outside the lock: two concurrent misses on the same key
    may both compute and the later store wins.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        """Initialize an empty cache.

        Args:
            clock: Monotonic time source in seconds (injectable for tests).
        """
        self._store: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._clock = clock

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def _lookup(self, key: str) -> Any:
        """Return cached value or _MISSING; evicts the entry if expired."""
        now = self._clock()
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return _MISSING
            if now >= entry.expires_at:
                del self._store[key]
                logger.debug("Cache EXPIRED: %s", key)
                return _MISSING
            return entry.value

    def get(self, key: str) -> Any | None:
        """Return cached value or None if missing or expired."""
        value = self._lookup(key)
        if value is _MISSING:
            logger.debug("Cache MISS: %s", key)
            return None
        logger.debug("Cache HIT: %s", key)
        return value

    def set(self, key: str, value: Any, ttl: float, namespace: str | None = None) -> None:
        """Store value for ttl seconds, overwriting any previous entry.

        Raises:
            ValueError: If ttl is negative.
        """
        if ttl < 0:
            raise ValueError(f"ttl must be >= 0, got {ttl}")
        expires_at = self._clock() + ttl
        with self._lock:
            self._store[key] = CacheEntry(value=value, expires_at=expires_at, namespace=namespace)
        logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)

    def get_or_compute(
        self,
        key: str,
        compute: Callable[[], T],
        ttl: float,
        use_cache: bool = True,
        namespace: str | None = None,
    ) -> tuple[T, bool]:
        """Return (value, cached), invoking compute only on miss or expiry.

        A failing compute stores nothing; its exception propagates unchanged.
        With use_cache False the cache is neither read nor written.

        Args:
            key: Cache key (use drq_site.infrastructure.cache.keys builders).
            compute: Zero-argument callable producing the value.
            ttl: Time-to-live in seconds for a freshly computed value.
            use_cache: Bypass the cache entirely when False.
            namespace: Optional grouping used by clear() and stats().

        Returns:
            Tuple of the value and whether it came from the cache.
        """
        if not use_cache:
            return compute(), False
        value = self._lookup(key)
        if value is not _MISSING:
            logger.debug("Cache HIT: %s", key)
            return value, True
        logger.debug("Cache MISS: %s", key)
        fresh = compute()
        self.set(key, fresh, ttl, namespace=namespace)
        return fresh, False

    def delete(self, key: str) -> bool:
        """Remove key. Returns True if it was present."""
        with self._lock:
            removed = self._store.pop(key, None) is not None
        if removed:
            logger.debug("Cache DELETE: %s", key)
        return removed

    def clear(self, namespace: str | None = None) -> int:
        """Remove every entry, or only those in namespace. Returns the count removed."""
        with self._lock:
            if namespace is None:
                removed = len(self._store)
                self._store.clear()
            else:
                keys = [k for k, e in self._store.items() if e.namespace == namespace]
                for k in keys:
                    del self._store[k]
                removed = len(keys)
        logger.info("Cache CLEARED: %s entries (namespace=%s)", removed, namespace)
        return removed

    def sweep_expired(self) -> int:
        """Remove all expired entries now. Returns the count removed."""
        now = self._clock()
        with self._lock:
            expired = [k for k, e in self._store.items() if now >= e.expires_at]
            for k in expired:
                del self._store[k]
        if expired:
            logger.debug("Cache sweep: removed %s expired entries", len(expired))
        return len(expired)

    def stats(self) -> dict[str, Any]:
        """Entry count overall and per namespace."""
        with self._lock:
            namespaces: dict[str, int] = {}
            for entry in self._store.values():
                if entry.namespace:
                    namespaces[entry.namespace] = namespaces.get(entry.namespace, 0) + 1
            return {"size": len(self._store), "namespaces": namespaces}


async def run_periodic_sweep(cache: ResultCache, interval_seconds: float) -> None:
    """Sweep expired entries every interval_seconds until cancelled."""
    logger.info("Cache sweep task started (every %ss)", interval_seconds)
    while True:
        await asyncio.sleep(interval_seconds)
        try:
            cache.sweep_expired()
        except Exception:
            logger.exception("Cache sweep failed")
