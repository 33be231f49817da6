"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ReasonError(Exception):
    """Base class for every failure raised while obtaining a reason.

    Example:
        >>> from howtosayno.domain.errors import ReasonError
        >>> str(ReasonError("boom"))
        'boom'
    """


class FetchTimeoutError(ReasonError, TimeoutError):
    """The remote did not answer within the connect, read or write deadline.

    Inherits from the builtin ``TimeoutError`` so generic timeout handlers
    keep working.

    Example:
        >>> err = FetchTimeoutError("read deadline of 30.0s exceeded")
        >>> isinstance(err, TimeoutError)
        True
    """


class UnreachableError(ReasonError, ConnectionError):
    """The remote host could not be resolved or connected to.

    Also covers transport-level I/O failures after the connection was made.

    Example:
        >>> err = UnreachableError("Name or service not known")
        >>> isinstance(err, OSError)
        True
    """


class ProtocolError(ReasonError):
    """The response body does not have the expected ``{"reason": ...}`` shape.

    Example:
        >>> str(ProtocolError("missing 'reason' field"))
        "missing 'reason' field"
    """


class HttpStatusError(ReasonError):
    """The remote answered with a non-2xx status code.

    Attributes:
        status_code: HTTP status returned by the remote.
    """

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"Request failed with status code: {status_code}")


class ServerError(HttpStatusError):
    """5xx answer from the remote.

    Example:
        >>> err = ServerError(503)
        >>> err.status_code
        503
        >>> str(err)
        'Service temporarily unavailable (status 503)'
    """

    def __init__(self, status_code: int) -> None:
        super().__init__(status_code, f"Service temporarily unavailable (status {status_code})")


class ClientError(HttpStatusError):
    """Non-2xx answer outside the 5xx range.

    Example:
        >>> str(ClientError(404))
        'Request failed with error code: 404'
    """

    def __init__(self, status_code: int) -> None:
        super().__init__(status_code, f"Request failed with error code: {status_code}")


class NoCachedReasonError(ReasonError):
    """A cached reason was required but none is stored.

    Example:
        >>> str(NoCachedReasonError())
        'No cached reasons available'
    """

    def __init__(self, message: str = "No cached reasons available") -> None:
        super().__init__(message)


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when a configuration section cannot be parsed into settings.
    Typically caught at CLI boundaries to provide user-friendly error messages.

    Example:
        >>> err = ConfigurationError("reason_api.connect_timeout must be positive")
        >>> str(err)
        'reason_api.connect_timeout must be positive'
    """


__all__ = [
    "ClientError",
    "ConfigurationError",
    "FetchTimeoutError",
    "HttpStatusError",
    "NoCachedReasonError",
    "ProtocolError",
    "ReasonError",
    "ServerError",
    "UnreachableError",
]
