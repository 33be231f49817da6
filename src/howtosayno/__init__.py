"""Offline-first client for the "reason to say no" service.

Public surface, routed through the architectural layers:

- Domain: cache entry, results and error classification
- Application: repository, retrieval use case and UI session
- Composition: wired production adapters
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application import GetReasonUseCase, ReasonRepository, ReasonSession, UiState

# Composition exports (wired adapters)
from .composition import build_production, get_config

# Domain exports
from .domain import AppError, CacheEntry, ErrorCategory, Failure, Success, categorize_error, to_app_error

__all__ = [
    "AppError",
    "CacheEntry",
    "ErrorCategory",
    "Failure",
    "GetReasonUseCase",
    "ReasonRepository",
    "ReasonSession",
    "Success",
    "UiState",
    "build_production",
    "categorize_error",
    "get_config",
    "print_info",
    "to_app_error",
]
