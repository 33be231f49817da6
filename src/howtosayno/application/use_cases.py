"""Offline-first retrieval use case.

Sequences repository operations so the last known reason is shown at once and
a network refresh follows:

1. Read the cache (synchronously, before any network activity).
2. Emit the cached reason when there is one.
3. Fetch from the network and emit the single outcome the repository
   produces: fresh data, the cached value again on failure, or an error.

The stream therefore has one or two emissions and always terminates.
"""

from __future__ import annotations

from collections.abc import Generator
from contextlib import closing

from ..domain.errors import NoCachedReasonError
from ..domain.results import Failure, Result, Success
from .repository import ReasonRepository


class GetReasonUseCase:
    """Entry point for the offline-first reason retrieval.

    Example:
        >>> from howtosayno.adapters.memory import InMemoryCacheStore, ScriptedReasonFetcher
        >>> cache = InMemoryCacheStore()
        >>> cache.write("Cached")
        >>> use_case = GetReasonUseCase(ReasonRepository(cache, ScriptedReasonFetcher("Fresh")))
        >>> [r.value for r in use_case()]
        ['Cached', 'Fresh']
    """

    def __init__(self, repository: ReasonRepository) -> None:
        self._repository = repository

    def __call__(self) -> Generator[Result[str], None, None]:
        return self.retrieve()

    def retrieve(self) -> Generator[Result[str], None, None]:
        """Yield the cached reason (if any), then the network-derived outcome."""
        cached = self._repository.get_cached_reason()
        if cached is not None:
            yield Success(cached)
        yield from self._repository.fetch_reason_with_fallback()

    def get_cached_reason(self) -> str | None:
        """Return the cached reason without touching the network."""
        return self._repository.get_cached_reason()

    def observe_cached_reason(self) -> Generator[Result[str], None, None]:
        """Yield the cached reason as a Result, now and after every change.

        An empty cache is reported as ``Failure(NoCachedReasonError)``. If the
        underlying stream raises, the error is emitted as a final ``Failure``.
        """
        try:
            with closing(self._repository.observe_cached_reason()) as reasons:
                for reason in reasons:
                    if reason is not None:
                        yield Success(reason)
                    else:
                        yield Failure(NoCachedReasonError())
        except Exception as exc:
            yield Failure(exc)

    def has_cached_reason(self) -> Generator[bool, None, None]:
        """Yield whether a cached reason exists, now and after every change."""
        return self._repository.observe_has_cached_reason()

    def clear_cache(self) -> None:
        """Remove the cached reason."""
        self._repository.clear_cache()


__all__ = ["GetReasonUseCase"]
