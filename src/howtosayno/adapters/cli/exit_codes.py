"""POSIX-conventional exit codes for CLI error paths.

Signal codes (130, 143) are informational only; ``lib_cli_exit_tools``
translates signals itself.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes used by this application, following sysexits.h and errno.

    Example:
        >>> int(ExitCode.NETWORK_UNAVAILABLE)
        69
        >>> ExitCode.TIMEOUT
        <ExitCode.TIMEOUT: 110>
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    NOT_FOUND = 2
    PERMISSION_DENIED = 13
    INVALID_ARGUMENT = 22
    NETWORK_UNAVAILABLE = 69
    CONFIG_ERROR = 78
    TIMEOUT = 110
    SIGNAL_INT = 130
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
