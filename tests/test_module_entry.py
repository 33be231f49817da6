"""``python -m howtosayno`` and the console script behave like the CLI."""

from __future__ import annotations

import runpy
import subprocess
import sys
from collections.abc import Callable

import lib_cli_exit_tools
import pytest

from howtosayno import __init__conf__, entry


def _explode() -> None:
    raise RuntimeError("metadata unavailable")


@pytest.mark.os_agnostic
def test_module_entry_without_arguments_shows_help(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "argv", ["howtosayno"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("howtosayno.__main__", run_name="__main__")

    assert exc.value.code == 0
    assert "Usage:" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_module_entry_traceback_flag_prints_full_traceback(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["howtosayno", "--traceback", "info"])
    monkeypatch.setattr(__init__conf__, "print_info", _explode)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("howtosayno.__main__", run_name="__main__")

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exc.value.code != 0
    assert "Traceback (most recent call last)" in plain_err
    assert "RuntimeError: metadata unavailable" in plain_err
    assert lib_cli_exit_tools.config.traceback is False


@pytest.mark.os_agnostic
def test_entry_main_shows_help(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(sys, "argv", ["howtosayno", "--help"])

    assert entry.main() == 0
    assert __init__conf__.shell_command in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_entry_main_returns_nonzero_on_error(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["howtosayno", "info"])
    monkeypatch.setattr(__init__conf__, "print_info", _explode)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False)

    exit_code = entry.main()

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exit_code != 0
    assert "RuntimeError" in plain_err or "metadata unavailable" in plain_err


@pytest.mark.os_agnostic
def test_cli_package_exports_every_command() -> None:
    from howtosayno.adapters import cli as cli_mod

    exported = {name for name in dir(cli_mod) if name.startswith("cli_")}

    assert exported == {"cli_cache_clear", "cli_cache_show", "cli_config", "cli_config_deploy", "cli_info", "cli_reason"}


@pytest.mark.os_agnostic
@pytest.mark.parametrize(("flag", "expected"), [("--help", "Usage:"), ("--version", __init__conf__.version)])
def test_subprocess_invocation(flag: str, expected: str) -> None:
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "howtosayno", flag],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )

    assert result.returncode == 0
    assert expected in result.stdout
