"""Adapters layer - infrastructure and framework integrations.

Connects the application ports to the outside world: the filesystem cache,
the HTTP endpoint, layered configuration, logging and the CLI.

Contents:
    * :mod:`.cache` - File-backed single-slot reason cache
    * :mod:`.http` - httpx client for the reason endpoint
    * :mod:`.config` - Configuration loading, deployment, display and settings
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
