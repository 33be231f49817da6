"""In-memory cache store for testing.

Satisfies the :class:`~howtosayno.application.ports.CacheStore` protocol
without touching the filesystem. Failure switches simulate a broken storage
backend so fail-open behaviour can be exercised.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Generator

from ...application.feed import ChangeFeed
from ...domain.models import DEFAULT_MAX_AGE_MILLIS, CacheEntry, now_millis

logger = logging.getLogger(__name__)


class InMemoryCacheStore:
    """Single-slot cache held in a plain attribute.

    Attributes:
        fail_reads: When True, reads behave like an unreadable backend and return None.
        fail_writes: When True, writes and clears are dropped.

    Example:
        >>> store = InMemoryCacheStore(clock=lambda: 7)
        >>> store.write("No.")
        >>> store.read()
        CacheEntry(value='No.', written_at_millis=7)
        >>> store.clear()
        >>> store.read() is None
        True
    """

    def __init__(
        self,
        *,
        max_age_millis: int = DEFAULT_MAX_AGE_MILLIS,
        clock: Callable[[], int] = now_millis,
        fail_reads: bool = False,
        fail_writes: bool = False,
    ) -> None:
        self._max_age_millis = max_age_millis
        self._clock = clock
        self._lock = threading.Lock()
        self._entry: CacheEntry | None = None
        self._feed: ChangeFeed[CacheEntry | None] = ChangeFeed()
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.write_count = 0

    def read(self) -> CacheEntry | None:
        if self.fail_reads:
            logger.warning("Cache read failed", extra={"backend": "memory"})
            return None
        with self._lock:
            return self._entry

    def write(self, value: str) -> None:
        if self.fail_writes:
            logger.warning("Cache write failed", extra={"backend": "memory"})
            return
        self._feed.commit(lambda: self._replace(CacheEntry(value=value, written_at_millis=self._clock())))

    def clear(self) -> None:
        if self.fail_writes:
            logger.warning("Cache clear failed", extra={"backend": "memory"})
            return
        self._feed.commit(lambda: self._replace(None))

    def observe(self) -> Generator[CacheEntry | None, None, None]:
        return self._feed.stream(self.read)

    def is_stale(self, entry: CacheEntry) -> bool:
        return entry.is_stale(self._max_age_millis, self._clock())

    def _replace(self, entry: CacheEntry | None) -> CacheEntry | None:
        with self._lock:
            self._entry = entry
            if entry is not None:
                self.write_count += 1
        return entry


__all__ = ["InMemoryCacheStore"]
