"""Tagged success/failure outcomes passed between repository, use case and session.

Failures travel as values across those boundaries instead of as raised
exceptions; the originating exception rides along as ``Failure.error``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .enums import ErrorCategory
from .error_handling import categorize_error

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """A successful outcome carrying ``value``.

    Example:
        >>> Success("No.").value
        'No.'
    """

    value: T


@dataclass(frozen=True, slots=True)
class Failure:
    """A failed outcome carrying the originating exception.

    Example:
        >>> from howtosayno.domain.errors import FetchTimeoutError
        >>> Failure(FetchTimeoutError("slow")).category
        <ErrorCategory.TIMEOUT: 'timeout'>
    """

    error: BaseException

    @property
    def category(self) -> ErrorCategory:
        """User-facing category derived from ``error``."""
        return categorize_error(self.error)


Result = Union[Success[T], Failure]
"""Either ``Success[T]`` or ``Failure``."""

FetchOutcome = Result[str]
"""Outcome of a single retrieval attempt for a reason."""


def is_success(result: Result[T]) -> bool:
    """Return True for ``Success`` outcomes."""
    return isinstance(result, Success)


def is_failure(result: Result[T]) -> bool:
    """Return True for ``Failure`` outcomes."""
    return isinstance(result, Failure)


def get_or_none(result: Result[T]) -> T | None:
    """Return the carried value of a ``Success`` or None.

    Example:
        >>> get_or_none(Success(3))
        3
        >>> get_or_none(Failure(ValueError())) is None
        True
    """
    if isinstance(result, Success):
        return result.value
    return None


def error_or_none(result: Result[T]) -> BaseException | None:
    """Return the carried exception of a ``Failure`` or None."""
    if isinstance(result, Failure):
        return result.error
    return None


__all__ = [
    "Failure",
    "FetchOutcome",
    "Result",
    "Success",
    "error_or_none",
    "get_or_none",
    "is_failure",
    "is_success",
]
