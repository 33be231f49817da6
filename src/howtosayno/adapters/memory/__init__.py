"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that run entirely in
memory: no filesystem, no network, no logging framework.

Contents:
    * :mod:`.cache` - In-memory cache store with failure switches
    * :mod:`.fetcher` - Scripted reason fetcher
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .cache import InMemoryCacheStore
from .config import (
    deploy_configuration_in_memory,
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
)
from .fetcher import ScriptedReasonFetcher
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from howtosayno.application.ports import (
        CacheStore,
        DeployConfiguration,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        ReasonFetcher,
    )

    _assert_cache: CacheStore = InMemoryCacheStore()
    _assert_fetcher: ReasonFetcher = ScriptedReasonFetcher()
    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_deploy: DeployConfiguration = deploy_configuration_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "InMemoryCacheStore",
    "ScriptedReasonFetcher",
    "deploy_configuration_in_memory",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
]
