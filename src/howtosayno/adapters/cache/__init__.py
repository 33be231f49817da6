"""Persistent cache adapters.

Contents:
    * :mod:`.file_store` - JSON file backed single-slot cache store
"""

from __future__ import annotations

from .file_store import DEFAULT_NAMESPACE, FileCacheStore, create_cache_store

__all__ = ["DEFAULT_NAMESPACE", "FileCacheStore", "create_cache_store"]
