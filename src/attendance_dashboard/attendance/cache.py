from __future__ import annotations

import logging
import threading
import time
from collections import Counter
from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class _Entry:
    value: Any
    stored_at: float


class QueryCache:
    """Thread-safe cache of read-query results.

    Entries are keyed by (query key, scope); the scope is the signed-in user
    so results fetched under one user's permissions never leak to another.
    `invalidate(key)` drops the key for every scope. A fetch that overlaps an
    invalidation of its key returns its data but does not store it, so the
    next read after a mutation always re-executes.

    `ttl_seconds=None` keeps entries until invalidated; `0` stores nothing,
    so every read re-executes. Entries live in one process only.
    """

    def __init__(self, ttl_seconds: Optional[float] = None, *, clock: Callable[[], float] = time.monotonic):
        self._ttl = None if ttl_seconds is None else float(ttl_seconds)
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: Dict[Tuple[Hashable, Hashable], _Entry] = {}
        self._generations: Counter = Counter()
        self.invalidations: Counter = Counter()

    @property
    def enabled(self) -> bool:
        return self._ttl is None or self._ttl > 0

    def _is_fresh(self, entry: _Entry) -> bool:
        if self._ttl is None:
            return True
        return self._clock() - entry.stored_at < self._ttl

    def is_cached(self, key: Hashable, *, scope: Hashable = "") -> bool:
        with self._lock:
            entry = self._entries.get((key, scope))
            return entry is not None and self._is_fresh(entry)

    def get_or_fetch(self, key: Hashable, fetch: Callable[[], T], *, scope: Hashable = "") -> T:
        with self._lock:
            entry = self._entries.get((key, scope))
            if entry is not None and self._is_fresh(entry):
                return entry.value
            generation = self._generations[key]

        # Errors propagate and are never cached.
        value = fetch()
        if not self.enabled:
            return value

        with self._lock:
            if self._generations[key] == generation:
                self._entries[(key, scope)] = _Entry(value=value, stored_at=self._clock())
            else:
                logger.debug("discarding %s result fetched across an invalidation", key)
        return value

    def invalidate(self, key: Hashable) -> None:
        with self._lock:
            self._generations[key] += 1
            self.invalidations[key] += 1
            for cache_key in [k for k in self._entries if k[0] == key]:
                del self._entries[cache_key]
        logger.debug("invalidated query %s", key)

    def drop_scope(self, scope: Hashable) -> None:
        """Forget everything cached for one scope (e.g. on sign-out)."""

        with self._lock:
            for cache_key in [k for k in self._entries if k[1] == scope]:
                del self._entries[cache_key]
