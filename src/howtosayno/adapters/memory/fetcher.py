"""Scripted reason fetcher for testing.

Plays back a fixed sequence of outcomes instead of calling the network.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable

from ...domain.errors import UnreachableError


class ScriptedReasonFetcher:
    """Return or raise the scripted outcomes in order.

    A ``str`` outcome is returned as the reason, an exception instance is
    raised. The last outcome repeats once the script is exhausted; an empty
    script behaves like an unreachable host.

    Attributes:
        calls: Number of fetch attempts so far.
        before_fetch: Optional hook run at the start of every attempt.

    Example:
        >>> fetcher = ScriptedReasonFetcher("First", UnreachableError("offline"))
        >>> fetcher.fetch_reason()
        'First'
        >>> fetcher.fetch_reason()
        Traceback (most recent call last):
        ...
        howtosayno.domain.errors.UnreachableError: offline
        >>> fetcher.calls
        2
    """

    def __init__(self, *outcomes: str | Exception, before_fetch: Callable[[], None] | None = None) -> None:
        self._outcomes: deque[str | Exception] = deque(outcomes)
        self.before_fetch = before_fetch
        self.calls = 0
        self.closed = False

    def fetch_reason(self) -> str:
        self.calls += 1
        if self.before_fetch is not None:
            self.before_fetch()
        if not self._outcomes:
            raise UnreachableError("no scripted outcome")
        outcome = self._outcomes.popleft() if len(self._outcomes) > 1 else self._outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self) -> None:
        self.closed = True


__all__ = ["ScriptedReasonFetcher"]
