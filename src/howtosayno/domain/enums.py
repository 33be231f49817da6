"""Type-safe domain enums for error categories, output formats and deployment targets."""

from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    """User-facing category a failure is sorted into.

    Attributes:
        NETWORK: Host unreachable, DNS failure or other I/O failure.
        TIMEOUT: A connect, read or write deadline was exceeded.
        CACHE: A cached reason was required but none exists.
        GENERIC: Anything else (parse errors, HTTP status errors, bugs).

    Example:
        >>> ErrorCategory.TIMEOUT.value
        'timeout'
        >>> ErrorCategory.NETWORK == "network"
        True
    """

    NETWORK = "network"
    TIMEOUT = "timeout"
    CACHE = "cache"
    GENERIC = "generic"


class ErrorDisplayStrategy(str, Enum):
    """How a front-end should surface an error of a given category."""

    PERSISTENT_CARD = "persistent_card"
    SNACKBAR_WITH_RETRY = "snackbar_with_retry"
    SNACKBAR_SIMPLE = "snackbar_simple"
    INLINE_MESSAGE = "inline_message"


class OutputFormat(str, Enum):
    """Output format options for configuration and state display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class DeployTarget(str, Enum):
    """Configuration deployment target layers.

    Attributes:
        APP: System-wide application configuration (requires privileges).
        HOST: System-wide host-specific configuration (requires privileges).
        USER: User-specific configuration (~/.config on Linux).

    Example:
        >>> DeployTarget.USER.value
        'user'
    """

    APP = "app"
    HOST = "host"
    USER = "user"


__all__ = [
    "DeployTarget",
    "ErrorCategory",
    "ErrorDisplayStrategy",
    "OutputFormat",
]
