"""Configuration display and deployment commands.

Contents:
    * :func:`cli_config` - Display merged configuration.
    * :func:`cli_config_deploy` - Deploy configuration to target locations.
"""

from __future__ import annotations

import logging
from pathlib import Path

import lib_log_rich.runtime
import rich_click as click

from howtosayno.domain.enums import DeployTarget, OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.option(
    "--section",
    type=str,
    default=None,
    help="Show only one section (e.g., 'reason_api', 'cache')",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Reload configuration for another profile (root --set overrides still apply)",
)
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Display the merged configuration.

    Precedence: defaults -> app -> host -> user -> dotenv -> env -> --set
    """
    cli_ctx = get_cli_context(ctx)
    config, effective_profile = cli_ctx.config_for(profile)
    fmt = OutputFormat(output_format.lower())

    extra = {"command": "config", "format": fmt.value, "profile": effective_profile}
    with lib_log_rich.runtime.bind(job_id="cli-config", extra=extra):
        logger.info("Displaying configuration", extra={"section": section})
        click.echo()
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=effective_profile)
        except ValueError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


def _report_deployment(paths: list[Path], profile: str | None) -> None:
    if not paths:
        click.echo("\nNo files were created (all target files already exist).")
        click.echo("Use --force to overwrite existing configuration files.")
        return
    suffix = f" (profile: {profile})" if profile else ""
    click.echo(f"\nConfiguration deployed successfully{suffix}:")
    for path in paths:
        click.echo(f"  ✓ {path}")


@click.command("config-deploy", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--target",
    "targets",
    type=click.Choice([t.value for t in DeployTarget], case_sensitive=False),
    multiple=True,
    required=True,
    help="Target configuration layer(s) to deploy to (can specify multiple)",
)
@click.option("--force", is_flag=True, default=False, help="Overwrite existing configuration files")
@click.option("--profile", type=str, default=None, help="Deploy into the directories of a named profile")
@click.pass_context
def cli_config_deploy(ctx: click.Context, targets: tuple[str, ...], force: bool, profile: str | None) -> None:
    r"""Deploy the default configuration to system or user directories.

    \b
    - app:  System-wide application config (requires privileges)
    - host: System-wide host config (requires privileges)
    - user: User-specific config (~/.config on Linux)

    Existing files are kept unless --force is given.
    """
    cli_ctx = get_cli_context(ctx)
    effective_profile = profile or cli_ctx.profile
    deploy_targets = tuple(DeployTarget(t.lower()) for t in targets)

    extra = {"command": "config-deploy", "targets": [t.value for t in deploy_targets], "force": force}
    with lib_log_rich.runtime.bind(job_id="cli-config-deploy", extra=extra):
        try:
            paths = cli_ctx.services.deploy_configuration(targets=deploy_targets, force=force, profile=effective_profile)
        except PermissionError as exc:
            logger.error("Permission denied when deploying configuration", extra={"error": str(exc)})
            click.echo(f"\nError: Permission denied. {exc}", err=True)
            click.echo("Hint: System-wide deployment (--target app/host) may require sudo.", err=True)
            raise SystemExit(ExitCode.PERMISSION_DENIED) from exc
        except ValueError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
        _report_deployment(paths, effective_profile)


__all__ = ["cli_config", "cli_config_deploy"]
