"""Root group, main() entry and traceback handling."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from typing import Any

import lib_cli_exit_tools
import pytest
import rich_click as click
from click.testing import CliRunner, Result
from lib_layered_config import Config

from howtosayno import __init__conf__
from howtosayno.adapters import cli as cli_mod
from howtosayno.adapters.cli.context import CLIContext, get_cli_context
from howtosayno.composition import build_production, build_testing


def _explode() -> None:
    raise RuntimeError("info exploded")


@pytest.mark.os_agnostic
def test_traceback_state_defaults_to_disabled(managed_traceback_state: None) -> None:
    assert cli_mod.snapshot_traceback_state() == (False, False)


@pytest.mark.os_agnostic
def test_apply_and_restore_traceback_preferences(managed_traceback_state: None) -> None:
    previous = cli_mod.snapshot_traceback_state()

    cli_mod.apply_traceback_preferences(True)
    assert (lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color) == (True, True)

    cli_mod.restore_traceback_state(previous)
    assert cli_mod.snapshot_traceback_state() == (False, False)


@pytest.mark.os_agnostic
def test_traceback_flag_is_active_while_the_command_runs(
    monkeypatch: pytest.MonkeyPatch, managed_traceback_state: None
) -> None:
    seen: list[tuple[bool, bool]] = []
    monkeypatch.setattr(__init__conf__, "print_info", lambda: seen.append(cli_mod.snapshot_traceback_state()))

    exit_code = cli_mod.main(["--traceback", "info"], services_factory=build_testing)

    assert exit_code == 0
    assert seen == [(True, True)]
    assert cli_mod.snapshot_traceback_state() == (False, False)


@pytest.mark.os_agnostic
def test_restore_traceback_false_keeps_flags(managed_traceback_state: None, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(__init__conf__, "print_info", lambda: None)

    cli_mod.main(["--traceback", "info"], restore_traceback=False, services_factory=build_testing)

    assert cli_mod.snapshot_traceback_state() == (True, True)


@pytest.mark.os_agnostic
def test_main_runs_info_with_production_services(
    managed_traceback_state: None, capsys: pytest.CaptureFixture[str]
) -> None:
    assert cli_mod.main(["info"], services_factory=build_production) == 0
    assert f"Info for {__init__conf__.name}:" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_main_without_arguments_prints_help(managed_traceback_state: None, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_mod.main([], services_factory=build_testing) == 0
    assert "Usage:" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_main_requires_services_factory() -> None:
    with pytest.raises(ValueError, match="services_factory is required"):
        cli_mod.main(["--help"], services_factory=None)


@pytest.mark.os_agnostic
def test_main_reports_usage_errors(managed_traceback_state: None, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli_mod.main(["--set", "no_dot=value", "info"], services_factory=build_testing)

    assert exit_code == 2
    assert "SECTION.KEY" in capsys.readouterr().err


@pytest.mark.os_agnostic
def test_unexpected_error_is_summarised(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    monkeypatch.setattr(__init__conf__, "print_info", _explode)

    exit_code = cli_mod.main(["info"], services_factory=build_testing)

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exit_code != 0
    assert "RuntimeError" in plain_err or "info exploded" in plain_err


@pytest.mark.os_agnostic
def test_traceback_flag_prints_full_traceback(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    monkeypatch.setattr(__init__conf__, "print_info", _explode)

    exit_code = cli_mod.main(["--traceback", "info"], services_factory=build_testing)

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exit_code != 0
    assert "Traceback (most recent call last)" in plain_err
    assert "RuntimeError: info exploded" in plain_err
    assert "[TRUNCATED" not in plain_err
    assert cli_mod.snapshot_traceback_state() == (False, False)


@pytest.mark.os_agnostic
def test_cli_without_subcommand_prints_help(cli_runner: CliRunner, production_factory: Callable[[], Any]) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["--traceback"], obj=production_factory)

    assert result.exit_code == 0
    assert "Usage:" in result.output


@pytest.mark.os_agnostic
def test_help_lists_every_command(cli_runner: CliRunner) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["--help"], obj=build_testing)

    for name in ("reason", "cache-show", "cache-clear", "info", "config", "config-deploy"):
        assert name in result.output


@pytest.mark.os_agnostic
def test_version_option(cli_runner: CliRunner) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["--version"], obj=build_testing)

    assert result.exit_code == 0
    assert f"{__init__conf__.shell_command} version {__init__conf__.version}" in result.output


@pytest.mark.os_agnostic
def test_unknown_command(cli_runner: CliRunner) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["does-not-exist"], obj=build_testing)

    assert result.exit_code != 0
    assert "No such command" in result.output


@pytest.mark.os_agnostic
def test_root_requires_callable_services_factory(cli_runner: CliRunner) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj="not_callable")

    assert result.exit_code != 0
    assert isinstance(result.exception, RuntimeError)


@pytest.mark.os_agnostic
def test_get_cli_context_requires_root_group() -> None:
    ctx = click.Context(click.Command("test"))
    ctx.obj = "not a CLIContext"

    with pytest.raises(RuntimeError, match="CLI context not initialized"):
        get_cli_context(ctx)


@pytest.mark.os_agnostic
def test_store_and_get_cli_context() -> None:
    ctx = click.Context(click.Command("test"))

    cli_mod.store_cli_context(
        ctx,
        traceback=True,
        config=Config({}, {}),
        services=build_testing(),
        profile="staging",
        set_overrides=("cache.namespace=x",),
    )
    stored = get_cli_context(ctx)

    assert isinstance(stored, CLIContext)
    assert stored.traceback is True
    assert stored.profile == "staging"
    assert stored.set_overrides == ("cache.namespace=x",)


@pytest.mark.os_agnostic
def test_profile_is_forwarded_to_get_config(cli_runner: CliRunner) -> None:
    seen: list[str | None] = []
    services = build_testing()

    def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
        seen.append(profile)
        return Config({}, {})

    patched = replace(services, get_config=_get_config)
    result: Result = cli_runner.invoke(cli_mod.cli, ["--profile", "staging", "info"], obj=lambda: patched)

    assert result.exit_code == 0
    assert seen == ["staging"]
