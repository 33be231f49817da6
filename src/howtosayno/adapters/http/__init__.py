"""HTTP adapters.

Contents:
    * :mod:`.fetcher` - httpx client for the remote reason endpoint
"""

from __future__ import annotations

from .fetcher import DEFAULT_BASE_URL, DEFAULT_PATH, HttpReasonFetcher, ReasonResponse, create_reason_fetcher

__all__ = ["DEFAULT_BASE_URL", "DEFAULT_PATH", "HttpReasonFetcher", "ReasonResponse", "create_reason_fetcher"]
