"""Multicast change feed with replay-on-subscribe.

Each subscriber owns an unbounded inbox. Commits and the fan-out to every
inbox happen under one lock, so all subscribers observe changes in commit
order, and a new subscriber's first item is the value current at the moment
it registered.
"""

from __future__ import annotations

import queue
import threading
from collections.abc import Callable, Generator
from typing import Generic, TypeVar

T = TypeVar("T")


class ChangeFeed(Generic[T]):
    """Broadcast values to any number of independent lazy streams.

    Example:
        >>> feed: ChangeFeed[int] = ChangeFeed()
        >>> state = {"value": 1}
        >>> stream = feed.stream(lambda: state["value"])
        >>> next(stream)
        1
        >>> feed.commit(lambda: state.update(value=2) or state["value"])
        2
        >>> next(stream)
        2
        >>> stream.close()
        >>> feed.subscriber_count
        0
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._inboxes: list[queue.SimpleQueue[T]] = []

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._inboxes)

    def commit(self, apply: Callable[[], T]) -> T:
        """Run ``apply`` under the feed lock and publish what it returns.

        If ``apply`` raises, nothing is published and the exception propagates.
        """
        with self._lock:
            value = apply()
            for inbox in self._inboxes:
                inbox.put(value)
            return value

    def publish(self, value: T) -> None:
        """Publish an already-committed value."""
        self.commit(lambda: value)

    def stream(self, current: Callable[[], T]) -> Generator[T, None, None]:
        """Yield ``current()`` at subscription, then every published value.

        Subscription happens on the first ``next()``. The stream never ends on
        its own; close it to unsubscribe.
        """
        inbox: queue.SimpleQueue[T] = queue.SimpleQueue()
        with self._lock:
            inbox.put(current())
            self._inboxes.append(inbox)
        try:
            while True:
                yield inbox.get()
        finally:
            with self._lock:
                self._inboxes.remove(inbox)


__all__ = ["ChangeFeed"]
