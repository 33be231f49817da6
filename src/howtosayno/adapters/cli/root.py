"""Root command group and global options (--traceback, --profile, --set)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from howtosayno import __init__conf__
from howtosayno.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from howtosayno.composition import AppServices


def _apply_cli_overrides(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Apply ``--set`` overrides, reporting malformed ones as usage errors."""
    try:
        return apply_overrides(config, set_overrides)
    except (TypeError, ValueError) as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable), e.g. reason_api.read_timeout=5",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Load configuration once, start logging and hand both to the subcommand.

    Without a subcommand a reason is fetched, as with ``reason``.

    Example:
        >>> from click.testing import CliRunner
        >>> from howtosayno.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["info"], obj=build_testing)
        >>> result.exit_code
        0
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = _apply_cli_overrides(services.get_config(profile=profile), set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        ctx.invoke(cli.commands["reason"])


# Commands import this module's ancestors, so they are registered after ``cli`` exists.
def _register_commands() -> None:
    from .commands import (
        cli_cache_clear,
        cli_cache_show,
        cli_config,
        cli_config_deploy,
        cli_info,
        cli_reason,
    )

    for cmd in (cli_reason, cli_cache_show, cli_cache_clear, cli_info, cli_config, cli_config_deploy):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
