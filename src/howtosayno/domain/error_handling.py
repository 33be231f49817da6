"""Error categorisation and user-facing error descriptions.

Turns any exception that escapes a retrieval into an :class:`AppError`: a
category, a display message, and the hints a front-end needs to decide how
to present it.

Contents:
    * :func:`categorize_error` - Map an exception to an :class:`ErrorCategory`.
    * :func:`to_app_error` - Build an :class:`AppError` from an exception.
    * :class:`AppError` - Categorised error with presentation helpers.
    * :class:`ErrorState` - Flattened error view for front-ends.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .enums import ErrorCategory, ErrorDisplayStrategy
from .errors import NoCachedReasonError

#: Messages shown to the user for each category.
ERROR_MESSAGES: Final[dict[ErrorCategory, str]] = {
    ErrorCategory.NETWORK: "No internet connection",
    ErrorCategory.TIMEOUT: "Request timed out, please try again",
    ErrorCategory.CACHE: "Could not find a reason. Please connect to the internet.",
    ErrorCategory.GENERIC: "Something went wrong, please try again",
}

_TITLES: Final[dict[ErrorCategory, str]] = {
    ErrorCategory.NETWORK: "No Internet Connection",
    ErrorCategory.TIMEOUT: "Request Timed Out",
    ErrorCategory.CACHE: "No Cached Content",
    ErrorCategory.GENERIC: "Something Went Wrong",
}

_RECOVERY_SUGGESTIONS: Final[dict[ErrorCategory, str]] = {
    ErrorCategory.NETWORK: "Check your network connection and try again",
    ErrorCategory.TIMEOUT: "The server is taking too long to respond. Try again in a moment",
    ErrorCategory.CACHE: "Connect to the internet to fetch new content",
    ErrorCategory.GENERIC: "Please try again in a moment",
}

_DETAILED_RECOVERY_SUGGESTIONS: Final[dict[ErrorCategory, tuple[str, ...]]] = {
    ErrorCategory.NETWORK: (
        "Check your Wi-Fi or wired network connection",
        "Check proxy and DNS settings",
        "Restart your network connection",
    ),
    ErrorCategory.TIMEOUT: (
        "The server is taking too long to respond",
        "Try again in a few moments",
        "Check your internet connection speed",
    ),
    ErrorCategory.CACHE: (
        "Connect to the internet to fetch new content",
        "Previously saved content is not available",
        "Try refreshing when online",
    ),
    ErrorCategory.GENERIC: (
        "An unexpected error occurred",
        "Please try again in a moment",
        "Report the problem if it persists",
    ),
}

_OFFLINE_CATEGORIES: Final[frozenset[ErrorCategory]] = frozenset({ErrorCategory.NETWORK, ErrorCategory.CACHE})


def categorize_error(error: BaseException) -> ErrorCategory:
    """Sort an exception into one of the four user-facing categories.

    Timeouts are checked before other ``OSError`` subclasses because the
    builtin ``TimeoutError`` is itself an ``OSError``.

    Example:
        >>> from howtosayno.domain.errors import FetchTimeoutError, UnreachableError, ProtocolError
        >>> categorize_error(FetchTimeoutError("slow")).value
        'timeout'
        >>> categorize_error(UnreachableError("dns")).value
        'network'
        >>> categorize_error(OSError("disk")).value
        'network'
        >>> categorize_error(NoCachedReasonError()).value
        'cache'
        >>> categorize_error(ProtocolError("bad json")).value
        'generic'
    """
    if isinstance(error, TimeoutError):
        return ErrorCategory.TIMEOUT
    if isinstance(error, OSError):
        return ErrorCategory.NETWORK
    if isinstance(error, NoCachedReasonError):
        return ErrorCategory.CACHE
    return ErrorCategory.GENERIC


def category_for_message(message: str) -> ErrorCategory:
    """Recover the category behind a message from :data:`ERROR_MESSAGES`.

    Unknown messages are GENERIC.

    Example:
        >>> category_for_message("No internet connection").value
        'network'
        >>> category_for_message("anything else").value
        'generic'
    """
    for category, text in ERROR_MESSAGES.items():
        if text == message:
            return category
    return ErrorCategory.GENERIC


def is_offline_category(category: ErrorCategory) -> bool:
    """Whether errors of ``category`` mean the user is effectively offline."""
    return category in _OFFLINE_CATEGORIES


@dataclass(frozen=True, slots=True)
class AppError:
    """A categorised, user-displayable error.

    Attributes:
        category: Category the original exception was sorted into.
        message: Message suitable for direct display.
        is_retryable: Whether offering a retry makes sense. Every category
            currently is.
        cause: The original exception, if any.

    Example:
        >>> err = to_app_error(NoCachedReasonError())
        >>> err.title
        'No Cached Content'
        >>> err.is_offline
        True
        >>> err.display_strategy.value
        'persistent_card'
    """

    category: ErrorCategory
    message: str
    is_retryable: bool = True
    cause: BaseException | None = None

    @property
    def title(self) -> str:
        """Short heading for the error."""
        return _TITLES[self.category]

    @property
    def recovery_suggestion(self) -> str:
        """One-line hint on how to recover."""
        return _RECOVERY_SUGGESTIONS[self.category]

    @property
    def detailed_recovery_suggestions(self) -> tuple[str, ...]:
        """Actionable recovery steps, most useful first."""
        return _DETAILED_RECOVERY_SUGGESTIONS[self.category]

    @property
    def is_offline(self) -> bool:
        """Whether the error indicates the user is offline."""
        return is_offline_category(self.category)

    @property
    def should_show_persistent_error(self) -> bool:
        """Cache errors stay visible until resolved; the rest are transient."""
        return self.category is ErrorCategory.CACHE

    @property
    def display_strategy(self) -> ErrorDisplayStrategy:
        """Preferred way to surface the error."""
        if self.should_show_persistent_error:
            return ErrorDisplayStrategy.PERSISTENT_CARD
        if self.category in (ErrorCategory.NETWORK, ErrorCategory.TIMEOUT):
            return ErrorDisplayStrategy.SNACKBAR_WITH_RETRY
        return ErrorDisplayStrategy.SNACKBAR_SIMPLE


def to_app_error(error: BaseException) -> AppError:
    """Convert an exception into an :class:`AppError`.

    Example:
        >>> from howtosayno.domain.errors import FetchTimeoutError
        >>> to_app_error(FetchTimeoutError("read")).message
        'Request timed out, please try again'
    """
    category = categorize_error(error)
    return AppError(category=category, message=ERROR_MESSAGES[category], is_retryable=True, cause=error)


@dataclass(frozen=True, slots=True)
class ErrorState:
    """Flattened error view for front-ends that do not want an AppError."""

    has_error: bool = False
    error_message: str | None = None
    error_category: ErrorCategory | None = None
    is_retryable: bool = True
    show_persistent_error: bool = False
    show_snackbar: bool = False

    @classmethod
    def from_app_error(cls, app_error: AppError) -> ErrorState:
        persistent = app_error.should_show_persistent_error
        return cls(
            has_error=True,
            error_message=app_error.message,
            error_category=app_error.category,
            is_retryable=app_error.is_retryable,
            show_persistent_error=persistent,
            show_snackbar=not persistent,
        )

    @classmethod
    def none(cls) -> ErrorState:
        return cls()


__all__ = [
    "ERROR_MESSAGES",
    "AppError",
    "ErrorState",
    "categorize_error",
    "category_for_message",
    "is_offline_category",
    "to_app_error",
]
