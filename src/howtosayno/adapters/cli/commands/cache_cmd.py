"""Commands inspecting and clearing the persisted reason.

Contents:
    * :func:`cli_cache_show` - Print the cached reason, its age and staleness.
    * :func:`cli_cache_clear` - Remove the cached reason.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import orjson
import rich_click as click

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def format_age(age_millis: int) -> str:
    """Render an age coarsely for humans.

    Example:
        >>> format_age(4_000), format_age(125_000), format_age(7_200_000)
        ('4s', '2m 5s', '2h 0m')
    """
    seconds = age_millis // 1000
    if seconds < 60:
        return f"{seconds}s"
    minutes, seconds = divmod(seconds, 60)
    if minutes < 60:
        return f"{minutes}m {seconds}s"
    hours, minutes = divmod(minutes, 60)
    return f"{hours}h {minutes}m"


@click.command("cache-show", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the entry as JSON")
@click.pass_context
def cli_cache_show(ctx: click.Context, as_json: bool) -> None:
    """Show the cached reason without touching the network.

    Exits with status 2 when nothing is cached.
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-cache-show", extra={"command": "cache-show"}):
        store = cli_ctx.cache_store()
        entry = store.read()
        if entry is None:
            click.echo("No cached reason.", err=True)
            raise SystemExit(ExitCode.NOT_FOUND)

        stale = store.is_stale(entry)
        age = entry.age_millis()
        if as_json:
            payload = {
                "reason": entry.value,
                "written_at_millis": entry.written_at_millis,
                "age_millis": age,
                "stale": stale,
            }
            click.echo(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode())
            return
        click.echo(entry.value)
        click.echo(f"(cached {format_age(age)} ago{', stale' if stale else ''})", err=True)


@click.command("cache-clear", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_cache_clear(ctx: click.Context) -> None:
    """Forget the cached reason."""
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-cache-clear", extra={"command": "cache-clear"}):
        cli_ctx.cache_store().clear()
        logger.info("Cache cleared")
        click.echo("Cache cleared.")


__all__ = ["cli_cache_clear", "cli_cache_show", "format_age"]
