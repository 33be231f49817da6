"""File-backed single-slot reason cache.

The entry is stored as a small JSON document holding two keys,
``cached_reason`` and ``cache_timestamp`` (epoch milliseconds), in one file
named after the cache namespace. Writes go to a sibling temp file that is
then moved over the target with :func:`os.replace`, so readers only ever see
the old or the new document.

All storage faults are logged and absorbed: reads fail open to "no entry",
writes and clears fail silently.
"""

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from collections.abc import Callable, Generator
from functools import partial
from pathlib import Path
from typing import Any, Final, cast

import orjson
from lib_layered_config import Config

from howtosayno.adapters.config.settings import load_cache_settings
from howtosayno.application.feed import ChangeFeed
from howtosayno.domain.models import DEFAULT_MAX_AGE_MILLIS, CacheEntry, now_millis

logger = logging.getLogger(__name__)

KEY_CACHED_REASON: Final[str] = "cached_reason"
KEY_CACHE_TIMESTAMP: Final[str] = "cache_timestamp"
DEFAULT_NAMESPACE: Final[str] = "no_reason_cache"


def _decode_entry(payload: object) -> CacheEntry | None:
    """Build a CacheEntry from a decoded document, or None if it holds no reason.

    Example:
        >>> _decode_entry({"cached_reason": "No.", "cache_timestamp": 5})
        CacheEntry(value='No.', written_at_millis=5)
        >>> _decode_entry({"cache_timestamp": 5}) is None
        True
    """
    if not isinstance(payload, dict):
        return None
    document = cast(dict[str, Any], payload)
    value = document.get(KEY_CACHED_REASON)
    if not isinstance(value, str) or not value:
        return None
    timestamp = document.get(KEY_CACHE_TIMESTAMP, 0)
    if isinstance(timestamp, bool) or not isinstance(timestamp, int):
        timestamp = 0
    return CacheEntry(value=value, written_at_millis=timestamp)


class FileCacheStore:
    """Persist the last known reason in ``<directory>/<namespace>.json``.

    Args:
        directory: Directory holding the cache file; created on first write.
        namespace: File stem of the cache file.
        max_age_millis: Age after which entries are reported as stale.
        clock: Source of epoch milliseconds for write timestamps.

    Example:
        >>> import tempfile
        >>> store = FileCacheStore(Path(tempfile.mkdtemp()), clock=lambda: 42)
        >>> store.read() is None
        True
        >>> store.write("Not today.")
        >>> store.read()
        CacheEntry(value='Not today.', written_at_millis=42)
    """

    def __init__(
        self,
        directory: Path,
        *,
        namespace: str = DEFAULT_NAMESPACE,
        max_age_millis: int = DEFAULT_MAX_AGE_MILLIS,
        clock: Callable[[], int] = now_millis,
    ) -> None:
        self._path = directory / f"{namespace}.json"
        self._max_age_millis = max_age_millis
        self._clock = clock
        self._feed: ChangeFeed[CacheEntry | None] = ChangeFeed()

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> CacheEntry | None:
        """Return the stored entry, or None when absent or unreadable."""
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.warning("Cache read failed", extra={"path": str(self._path), "error": str(exc)})
            return None
        try:
            return _decode_entry(orjson.loads(raw))
        except orjson.JSONDecodeError as exc:
            logger.warning("Cache file is corrupt, ignoring it", extra={"path": str(self._path), "error": str(exc)})
            return None

    def write(self, value: str) -> None:
        """Replace the entry with ``value`` stamped with the current time."""
        try:
            self._feed.commit(partial(self._store, value))
        except (OSError, orjson.JSONEncodeError) as exc:
            logger.warning("Cache write failed", extra={"path": str(self._path), "error": str(exc)})

    def clear(self) -> None:
        """Remove the entry."""
        try:
            self._feed.commit(self._remove)
        except OSError as exc:
            logger.warning("Cache clear failed", extra={"path": str(self._path), "error": str(exc)})

    def observe(self) -> Generator[CacheEntry | None, None, None]:
        """Yield the current entry, then the entry after every write or clear."""
        return self._feed.stream(self.read)

    def is_stale(self, entry: CacheEntry) -> bool:
        return entry.is_stale(self._max_age_millis, self._clock())

    def _store(self, value: str) -> CacheEntry:
        entry = CacheEntry(value=value, written_at_millis=self._clock())
        payload = orjson.dumps({KEY_CACHED_REASON: entry.value, KEY_CACHE_TIMESTAMP: entry.written_at_millis})
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=f".{self._path.stem}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
            os.replace(tmp_name, self._path)
        except BaseException:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(tmp_name)
            raise
        return entry

    def _remove(self) -> None:
        with contextlib.suppress(FileNotFoundError):
            self._path.unlink()


def create_cache_store(config: Config) -> FileCacheStore:
    """Build the file cache described by the ``[cache]`` section.

    Raises:
        ConfigurationError: The section is invalid.
    """
    settings = load_cache_settings(config)
    return FileCacheStore(
        settings.resolved_directory(),
        namespace=settings.namespace,
        max_age_millis=settings.max_age_millis,
    )


__all__ = ["DEFAULT_NAMESPACE", "KEY_CACHE_TIMESTAMP", "KEY_CACHED_REASON", "FileCacheStore", "create_cache_store"]
