"""Repository composing the cache store and the remote fetcher.

Presents "one remote value, one cached value" as a single stream contract.
Remote failures are absorbed here: whenever a cached reason exists, a failed
fetch is reported downstream as a successful emission of the cached value.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import closing

from ..domain.results import Failure, FetchOutcome, Success
from .ports import CacheStore, ReasonFetcher

logger = logging.getLogger(__name__)


class ReasonRepository:
    """Offline-first access to the reason.

    Example:
        >>> from howtosayno.adapters.memory import InMemoryCacheStore, ScriptedReasonFetcher
        >>> repo = ReasonRepository(InMemoryCacheStore(), ScriptedReasonFetcher("Not today."))
        >>> list(repo.fetch_reason_with_fallback())
        [Success(value='Not today.')]
        >>> repo.get_cached_reason()
        'Not today.'
    """

    def __init__(self, cache: CacheStore, fetcher: ReasonFetcher) -> None:
        self._cache = cache
        self._fetcher = fetcher

    def fetch_reason_with_fallback(self) -> Generator[FetchOutcome, None, None]:
        """Attempt one remote fetch and emit exactly one outcome.

        On success the reason is cached before it is emitted. On failure the
        cache is consulted once: a cached value is emitted as ``Success`` and
        the error is dropped, otherwise the error is emitted as ``Failure``.

        Yields:
            A single ``Success`` or ``Failure``.
        """
        try:
            reason = self._fetcher.fetch_reason()
        except Exception as exc:
            yield self._fallback(exc)
            return
        self._cache.write(reason)
        logger.debug("Fetched and cached a fresh reason", extra={"length": len(reason)})
        yield Success(reason)

    def _fallback(self, exc: Exception) -> FetchOutcome:
        cached = self.get_cached_reason()
        if cached is not None:
            logger.warning(
                "Fetch failed, serving cached reason instead",
                extra={"error_type": type(exc).__name__, "error": str(exc)},
            )
            return Success(cached)
        logger.warning(
            "Fetch failed and no cached reason is available",
            extra={"error_type": type(exc).__name__, "error": str(exc)},
        )
        return Failure(exc)

    def get_cached_reason(self) -> str | None:
        """Return the cached reason, or None when nothing is cached."""
        entry = self._cache.read()
        return entry.value if entry is not None else None

    def has_cached_reason(self) -> bool:
        """Return True when a cached reason exists."""
        return self.get_cached_reason() is not None

    def cache_reason(self, value: str) -> None:
        """Store ``value`` as the cached reason."""
        self._cache.write(value)

    def observe_cached_reason(self) -> Generator[str | None, None, None]:
        """Yield the cached reason now and after every cache change."""
        with closing(self._cache.observe()) as entries:
            for entry in entries:
                yield entry.value if entry is not None else None

    def observe_has_cached_reason(self) -> Generator[bool, None, None]:
        """Yield whether a cached reason exists, now and after every change."""
        with closing(self.observe_cached_reason()) as reasons:
            for reason in reasons:
                yield reason is not None

    def clear_cache(self) -> None:
        """Remove the cached reason."""
        self._cache.clear()


__all__ = ["ReasonRepository"]
