"""Display state record and the pure reducers that fold retrieval events into it.

Every reducer takes a :class:`UiState` and returns a new one; none of them
raise. :class:`~howtosayno.application.session.ReasonSession` owns the
current state and decides which reducer to apply.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from ..domain.error_handling import ERROR_MESSAGES, categorize_error, is_offline_category


@dataclass(frozen=True, slots=True)
class UiState:
    """Everything a front-end needs to render the reason screen.

    Attributes:
        reason: Reason currently displayed; empty until one is known.
        is_loading: A retrieval is in flight.
        error: User-facing error message, or None.
        is_offline: The last failure means the user is offline.
        has_cache: A reason has been shown from cache or network.
        is_button_enabled: A new fetch may be requested.

    Example:
        >>> state = UiState()
        >>> state.is_button_enabled, state.has_content, state.should_show_retry
        (True, False, False)
    """

    reason: str = ""
    is_loading: bool = False
    error: str | None = None
    is_offline: bool = False
    has_cache: bool = False
    is_button_enabled: bool = True

    @property
    def has_error(self) -> bool:
        return self.error is not None

    @property
    def has_content(self) -> bool:
        return bool(self.reason) and not self.has_error

    @property
    def should_show_retry(self) -> bool:
        return self.has_error and not self.is_loading

    def as_dict(self) -> dict[str, Any]:
        """Fields plus derived flags, for JSON output."""
        return {
            "reason": self.reason,
            "is_loading": self.is_loading,
            "error": self.error,
            "is_offline": self.is_offline,
            "has_cache": self.has_cache,
            "is_button_enabled": self.is_button_enabled,
            "has_error": self.has_error,
            "has_content": self.has_content,
            "should_show_retry": self.should_show_retry,
        }


def start_loading(state: UiState) -> UiState:
    """A retrieval has been subscribed to."""
    return replace(state, is_loading=True, is_button_enabled=False)


def settle(state: UiState) -> UiState:
    """The retrieval stream has ended; re-enable the fetch button."""
    return replace(state, is_loading=False, is_button_enabled=True)


def apply_success(state: UiState, reason: str, *, terminal: bool = True) -> UiState:
    """Show ``reason`` and drop any error or offline flag.

    Non-terminal emissions (a cached reason shown while the refresh is still
    running) leave the loading flags alone.

    Example:
        >>> s = apply_success(start_loading(UiState()), "Cached", terminal=False)
        >>> s.reason, s.is_loading, s.is_button_enabled
        ('Cached', True, False)
        >>> settled = apply_success(s, "Fresh")
        >>> settled.reason, settled.is_loading, settled.is_button_enabled
        ('Fresh', False, True)
    """
    updated = replace(state, reason=reason, error=None, is_offline=False, has_cache=True)
    return settle(updated) if terminal else updated


def apply_failure(state: UiState, error: BaseException, *, terminal: bool = True) -> UiState:
    """Show the message for ``error``'s category; keep any previous reason.

    Example:
        >>> from howtosayno.domain.errors import UnreachableError
        >>> s = apply_failure(UiState(reason="Old", has_cache=True), UnreachableError("dns"))
        >>> s.reason, s.error, s.is_offline
        ('Old', 'No internet connection', True)
    """
    category = categorize_error(error)
    updated = replace(state, error=ERROR_MESSAGES[category], is_offline=is_offline_category(category))
    return settle(updated) if terminal else updated


def clear_error(state: UiState) -> UiState:
    """Dismiss the current error without touching anything else."""
    return replace(state, error=None)


__all__ = [
    "UiState",
    "apply_failure",
    "apply_success",
    "clear_error",
    "settle",
    "start_loading",
]
