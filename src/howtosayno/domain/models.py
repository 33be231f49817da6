"""Value objects for the single-slot reason cache."""

from __future__ import annotations

import time
from dataclasses import dataclass

#: Default age after which a cached reason is flagged as stale (one hour).
DEFAULT_MAX_AGE_MILLIS = 60 * 60 * 1000


def now_millis() -> int:
    """Return the current wall-clock time as integer epoch milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """The last known reason together with the moment it was written.

    Attributes:
        value: The cached reason text.
        written_at_millis: Epoch milliseconds of the write.

    Example:
        >>> entry = CacheEntry("Not today.", written_at_millis=1_000)
        >>> entry.age_millis(now=4_000)
        3000
        >>> entry.is_stale(max_age_millis=2_000, now=4_000)
        True
    """

    value: str
    written_at_millis: int

    def age_millis(self, now: int | None = None) -> int:
        """Milliseconds elapsed since the entry was written (never negative)."""
        current = now_millis() if now is None else now
        return max(0, current - self.written_at_millis)

    def is_stale(self, max_age_millis: int = DEFAULT_MAX_AGE_MILLIS, now: int | None = None) -> bool:
        """Whether the entry is older than ``max_age_millis``.

        Staleness is informational only; stores keep returning stale entries.
        """
        return self.age_millis(now) >= max_age_millis


__all__ = ["DEFAULT_MAX_AGE_MILLIS", "CacheEntry", "now_millis"]
