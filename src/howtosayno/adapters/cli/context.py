"""Per-invocation CLI state and the traceback flags of lib_cli_exit_tools.

The root group resolves configuration and services once and stores a
:class:`CLIContext` in ``ctx.obj``. Subcommands build the cache store and
the repository through it, so a bad ``[cache]`` or ``[reason_api]`` section
is reported the same way everywhere.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from howtosayno.adapters.config.overrides import apply_overrides
from howtosayno.application.ports import CacheStore
from howtosayno.application.repository import ReasonRepository
from howtosayno.domain.errors import ConfigurationError

from .exit_codes import ExitCode

if TYPE_CHECKING:
    from howtosayno.composition import AppServices

logger = logging.getLogger(__name__)

TracebackState = tuple[bool, bool]
"""Captured traceback configuration: (traceback_enabled, force_color)."""


def _configuration_failed(exc: ConfigurationError) -> SystemExit:
    logger.error("Invalid configuration", extra={"error": str(exc)})
    click.echo(f"Error: {exc}", err=True)
    return SystemExit(ExitCode.CONFIG_ERROR)


@dataclass(slots=True)
class CLIContext:
    """Configuration and services resolved by the root group.

    ``set_overrides`` is kept so a subcommand-level ``--profile`` can reload
    configuration without losing the root ``--set`` values.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    def config_for(self, profile: str | None) -> tuple[Config, str | None]:
        """Return the root config, or a reload of it for another profile."""
        if not profile:
            return self.config, self.profile
        reloaded = self.services.get_config(profile=profile)
        return apply_overrides(reloaded, self.set_overrides), profile

    def cache_store(self) -> CacheStore:
        """Create the configured cache store.

        Raises:
            SystemExit: ``CONFIG_ERROR`` when the ``[cache]`` section is invalid.
        """
        try:
            return self.services.create_cache_store(self.config)
        except ConfigurationError as exc:
            raise _configuration_failed(exc) from exc

    @contextmanager
    def open_repository(self) -> Iterator[ReasonRepository]:
        """Yield a repository over the configured cache and fetcher; close the fetcher on exit.

        Raises:
            SystemExit: ``CONFIG_ERROR`` when ``[cache]`` or ``[reason_api]`` is invalid.
        """
        cache = self.cache_store()
        try:
            fetcher = self.services.create_reason_fetcher(self.config)
        except ConfigurationError as exc:
            raise _configuration_failed(exc) from exc
        try:
            yield ReasonRepository(cache, fetcher)
        finally:
            fetcher.close()


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> CLIContext:
    """Replace ``ctx.obj`` (the services factory) with the resolved CLIContext.

    Example:
        >>> from unittest.mock import MagicMock
        >>> from howtosayno.composition import build_testing
        >>> ctx = MagicMock()
        >>> store_cli_context(ctx, traceback=True, config=MagicMock(), services=build_testing()).traceback
        True
    """
    ctx.obj = CLIContext(traceback, config, services, profile, set_overrides)
    return ctx.obj


def get_cli_context(ctx: click.Context) -> CLIContext:
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Mirror the ``--traceback`` flag into ``lib_cli_exit_tools.config``."""
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    config = lib_cli_exit_tools.config
    return bool(getattr(config, "traceback", False)), bool(getattr(config, "traceback_force_color", False))


def restore_traceback_state(state: TracebackState) -> None:
    """Reapply flags captured by :func:`snapshot_traceback_state`.

    Example:
        >>> original = snapshot_traceback_state()
        >>> apply_traceback_preferences(not original[0])
        >>> restore_traceback_state(original)
        >>> snapshot_traceback_state() == original
        True
    """
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = state


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
