"""The ``reason`` command: one offline-first retrieval.

The cached reason (if any) is printed at once, followed by the fresh one
when it differs. Failures are reported on stderr with a recovery hint and
mapped to an exit code by category.

Contents:
    * :func:`cli_reason` - Run one retrieval through a ReasonSession.
"""

from __future__ import annotations

import logging
from typing import Final

import lib_log_rich.runtime
import orjson
import rich_click as click

from howtosayno.application.session import ReasonSession
from howtosayno.application.ui_state import UiState
from howtosayno.application.use_cases import GetReasonUseCase
from howtosayno.domain.enums import ErrorCategory
from howtosayno.domain.error_handling import AppError, category_for_message

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_EXIT_CODES: Final[dict[ErrorCategory, ExitCode]] = {
    ErrorCategory.NETWORK: ExitCode.NETWORK_UNAVAILABLE,
    ErrorCategory.CACHE: ExitCode.NETWORK_UNAVAILABLE,
    ErrorCategory.TIMEOUT: ExitCode.TIMEOUT,
    ErrorCategory.GENERIC: ExitCode.GENERAL_ERROR,
}


def exit_code_for(state: UiState) -> ExitCode:
    """Exit code for a settled state.

    Example:
        >>> exit_code_for(UiState(reason="No."))
        <ExitCode.SUCCESS: 0>
        >>> exit_code_for(UiState(error="Request timed out, please try again"))
        <ExitCode.TIMEOUT: 110>
    """
    if state.error is None:
        return ExitCode.SUCCESS
    return _EXIT_CODES[category_for_message(state.error)]


class _ReasonPrinter:
    """Session listener echoing every newly displayed reason once."""

    def __init__(self) -> None:
        self._shown = ""

    def __call__(self, state: UiState) -> None:
        if state.reason and state.reason != self._shown:
            self._shown = state.reason
            click.echo(state.reason)


def _report_error(state: UiState) -> None:
    if state.error is None:
        return
    app_error = AppError(category=category_for_message(state.error), message=state.error)
    click.echo(f"{app_error.title}: {app_error.message}", err=True)
    click.echo(f"Hint: {app_error.recovery_suggestion}", err=True)


@click.command("reason", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the final state as JSON")
@click.pass_context
def cli_reason(ctx: click.Context, as_json: bool) -> None:
    """Print a reason to say no, falling back to the last cached one when offline."""
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-reason", extra={"command": "reason", "json": as_json}):
        with cli_ctx.open_repository() as repository:
            session = ReasonSession(GetReasonUseCase(repository))
            if not as_json:
                session.subscribe(_ReasonPrinter())
            session.fetch_new_reason()
            state = session.state
            session.close()

        logger.info("Retrieval finished", extra={"has_content": state.has_content, "error": state.error})
        if as_json:
            click.echo(orjson.dumps(state.as_dict(), option=orjson.OPT_INDENT_2).decode())
        else:
            _report_error(state)

        code = exit_code_for(state)
        if code is not ExitCode.SUCCESS:
            raise SystemExit(code)


__all__ = ["cli_reason", "exit_code_for"]
