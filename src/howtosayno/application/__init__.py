"""Application layer - use cases, state reduction and port definitions.

Contents:
    * :mod:`.ports` - Protocol definitions for adapter objects and functions
    * :mod:`.feed` - Multicast change feed used for observation
    * :mod:`.repository` - Cache + network repository with offline fallback
    * :mod:`.use_cases` - Offline-first retrieval use case
    * :mod:`.ui_state` - Display state record and pure reducers
    * :mod:`.session` - Session controller owning the display state
"""

from __future__ import annotations

from .feed import ChangeFeed
from .ports import (
    CacheStore,
    CreateCacheStore,
    CreateReasonFetcher,
    DeployConfiguration,
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    ReasonFetcher,
)
from .repository import ReasonRepository
from .session import ReasonSession
from .ui_state import UiState
from .use_cases import GetReasonUseCase

__all__ = [
    # Ports
    "CacheStore",
    "CreateCacheStore",
    "CreateReasonFetcher",
    "DeployConfiguration",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "ReasonFetcher",
    # Core
    "ChangeFeed",
    "GetReasonUseCase",
    "ReasonRepository",
    "ReasonSession",
    "UiState",
]
