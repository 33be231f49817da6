"""Session controller owning the display state of one UI session.

The session is the only writer of :class:`~howtosayno.application.ui_state.UiState`.
Front-ends read ``state``, register listeners or iterate ``observe()``, and
drive it through three commands: :meth:`ReasonSession.fetch_new_reason`,
:meth:`ReasonSession.retry` and :meth:`ReasonSession.clear_error`.

Contents:
    * :class:`ReasonSession` - State container and command surface.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Generator
from concurrent.futures import Executor, Future
from contextlib import closing
from functools import partial

from ..domain.results import Failure, Result
from .feed import ChangeFeed
from .ui_state import UiState, apply_failure, apply_success, clear_error, settle, start_loading
from .use_cases import GetReasonUseCase

logger = logging.getLogger(__name__)

Listener = Callable[[UiState], None]
"""Callback invoked with every new state, in commit order."""

Reducer = Callable[[UiState], UiState]


class ReasonSession:
    """Fold offline-first retrievals into a single observable :class:`UiState`.

    Every emission of a retrieval is applied as soon as it arrives, but the
    loading flag and the disabled fetch button are kept until the stream has
    ended; only then is the state settled. A cached reason therefore shows up
    immediately while the button stays disabled until the refresh is done.

    Without an executor retrievals run on the calling thread. With one, the
    network wait happens on a worker and :meth:`wait` blocks until it is done.

    Args:
        use_case: Offline-first retrieval to run.
        executor: Optional executor for running retrievals off the caller's thread.

    Example:
        >>> from howtosayno.adapters.memory import InMemoryCacheStore, ScriptedReasonFetcher
        >>> from howtosayno.application.repository import ReasonRepository
        >>> repo = ReasonRepository(InMemoryCacheStore(), ScriptedReasonFetcher("Test"))
        >>> session = ReasonSession(GetReasonUseCase(repo))
        >>> session.fetch_new_reason()
        True
        >>> session.state.reason, session.state.is_loading, session.state.is_button_enabled
        ('Test', False, True)
    """

    def __init__(self, use_case: GetReasonUseCase, *, executor: Executor | None = None) -> None:
        self._use_case = use_case
        self._executor = executor
        self._lock = threading.RLock()
        self._state = UiState()
        self._listeners: list[Listener] = []
        self._feed: ChangeFeed[UiState] = ChangeFeed()
        self._closed = False
        self._in_flight: Future[None] | None = None

    @property
    def state(self) -> UiState:
        return self._state

    @property
    def is_closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with every future state; returns an unsubscribe callable.

        A listener that raises is logged and skipped for that state.
        """
        with self._lock:
            self._listeners.append(listener)

        def _unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return _unsubscribe

    def observe(self) -> Generator[UiState, None, None]:
        """Yield the current state, then every subsequent state."""
        return self._feed.stream(lambda: self._state)

    def fetch_new_reason(self) -> bool:
        """Start a retrieval unless one is already running.

        Returns:
            True when a retrieval was started, False when the request was
            ignored because the fetch button is disabled or the session is closed.
        """
        with self._lock:
            if self._closed or not self._state.is_button_enabled:
                logger.debug("Ignoring fetch request", extra={"closed": self._closed, "loading": self._state.is_loading})
                return False
            self._commit(start_loading)
            if self._executor is not None:
                self._in_flight = self._executor.submit(self._run)
                return True
        self._run()
        return True

    def retry(self) -> bool:
        """Run the retrieval again from the top."""
        return self.fetch_new_reason()

    def clear_error(self) -> None:
        """Dismiss the current error message."""
        with self._lock:
            self._commit(clear_error)

    def wait(self, timeout: float | None = None) -> UiState:
        """Block until the in-flight retrieval (if any) has finished."""
        future = self._in_flight
        if future is not None:
            future.result(timeout=timeout)
        return self._state

    def close(self) -> None:
        """Tear the session down.

        A retrieval still in flight keeps running, but whatever it emits from
        now on is discarded and the state no longer changes.
        """
        with self._lock:
            self._closed = True
            self._listeners.clear()

    def _run(self) -> None:
        try:
            with closing(self._use_case.retrieve()) as results:
                for result in results:
                    if self._closed:
                        logger.debug("Session closed, discarding retrieval")
                        return
                    self._commit(partial(_apply_result, result))
        except Exception as exc:
            logger.error("Retrieval stream failed unexpectedly", exc_info=True)
            self._commit(partial(apply_failure, error=exc, terminal=False))
        finally:
            self._commit(settle)

    def _commit(self, reducer: Reducer) -> None:
        with self._lock:
            if self._closed:
                return
            new_state = reducer(self._state)
            if new_state == self._state:
                return
            self._state = new_state
            self._feed.publish(new_state)
            for listener in list(self._listeners):
                try:
                    listener(new_state)
                except Exception:
                    logger.exception("State listener failed", extra={"listener": repr(listener)})


def _apply_result(result: Result[str], state: UiState) -> UiState:
    if isinstance(result, Failure):
        return apply_failure(state, result.error, terminal=False)
    return apply_success(state, result.value, terminal=False)


__all__ = ["Listener", "ReasonSession"]
