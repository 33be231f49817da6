"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.models` - Cache entry value object and clock helper
    * :mod:`.results` - Success/Failure outcome types
    * :mod:`.enums` - Domain enumerations (ErrorCategory, OutputFormat, DeployTarget)
    * :mod:`.errors` - Domain exception types
    * :mod:`.error_handling` - Error categorisation and user-facing messages
"""

from __future__ import annotations

from .enums import DeployTarget, ErrorCategory, ErrorDisplayStrategy, OutputFormat
from .error_handling import (
    ERROR_MESSAGES,
    AppError,
    ErrorState,
    categorize_error,
    category_for_message,
    is_offline_category,
    to_app_error,
)
from .errors import (
    ClientError,
    ConfigurationError,
    FetchTimeoutError,
    HttpStatusError,
    NoCachedReasonError,
    ProtocolError,
    ReasonError,
    ServerError,
    UnreachableError,
)
from .models import DEFAULT_MAX_AGE_MILLIS, CacheEntry, now_millis
from .results import Failure, FetchOutcome, Result, Success, error_or_none, get_or_none, is_failure, is_success

__all__ = [
    # Models
    "DEFAULT_MAX_AGE_MILLIS",
    "CacheEntry",
    "now_millis",
    # Results
    "Failure",
    "FetchOutcome",
    "Result",
    "Success",
    "error_or_none",
    "get_or_none",
    "is_failure",
    "is_success",
    # Enums
    "DeployTarget",
    "ErrorCategory",
    "ErrorDisplayStrategy",
    "OutputFormat",
    # Error handling
    "ERROR_MESSAGES",
    "AppError",
    "ErrorState",
    "categorize_error",
    "category_for_message",
    "is_offline_category",
    "to_app_error",
    # Errors
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
