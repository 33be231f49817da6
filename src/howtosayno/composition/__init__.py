"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.cache.file_store import create_cache_store
from ..adapters.config.deploy import deploy_configuration
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path
from ..adapters.http.fetcher import create_reason_fetcher
from ..adapters.logging.setup import init_logging

# Every production adapter must satisfy its port; checked by the type checker only.
if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.memory import InMemoryCacheStore, ScriptedReasonFetcher
    from ..application.ports import (
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

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_deploy_configuration: DeployConfiguration = deploy_configuration
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_create_cache_store: CreateCacheStore = create_cache_store
    _assert_create_reason_fetcher: CreateReasonFetcher = create_reason_fetcher


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    deploy_configuration: DeployConfiguration
    display_config: DisplayConfig
    init_logging: InitLogging
    create_cache_store: CreateCacheStore
    create_reason_fetcher: CreateReasonFetcher


def build_production() -> AppServices:
    """Wire the file cache, the HTTP fetcher and lib_* adapters."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        deploy_configuration=deploy_configuration,
        display_config=display_config,
        init_logging=init_logging,
        create_cache_store=create_cache_store,
        create_reason_fetcher=create_reason_fetcher,
    )


def build_testing(
    *,
    cache: InMemoryCacheStore | None = None,
    fetcher: ScriptedReasonFetcher | None = None,
) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        cache: Cache handed out by ``create_cache_store``. A fresh empty
            cache is created when None. Pass your own to inspect it afterwards.
        fetcher: Fetcher handed out by ``create_reason_fetcher``. Defaults to
            one that always answers with a fixed reason.

    Example:
        >>> from howtosayno.adapters.memory import ScriptedReasonFetcher
        >>> services = build_testing(fetcher=ScriptedReasonFetcher("Nope."))
        >>> services.create_reason_fetcher(services.get_config()).fetch_reason()
        'Nope.'
    """
    from ..adapters.memory import (
        InMemoryCacheStore,
        ScriptedReasonFetcher,
        deploy_configuration_in_memory,
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
    )

    cache_store = cache if cache is not None else InMemoryCacheStore()
    reason_fetcher = fetcher if fetcher is not None else ScriptedReasonFetcher("This is a test reason.")

    def _cache_factory(config: Config) -> CacheStore:
        return cache_store

    def _fetcher_factory(config: Config) -> ReasonFetcher:
        return reason_fetcher

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        deploy_configuration=deploy_configuration_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        create_cache_store=_cache_factory,
        create_reason_fetcher=_fetcher_factory,
    )


__all__ = [
    # Configuration
    "get_config",
    "get_default_config_path",
    "deploy_configuration",
    "display_config",
    # Cache and network
    "create_cache_store",
    "create_reason_fetcher",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
