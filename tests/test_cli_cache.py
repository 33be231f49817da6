"""``cache-show`` and ``cache-clear`` commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import orjson
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from howtosayno.adapters import cli as cli_mod
from howtosayno.adapters.cli.commands.cache_cmd import format_age
from howtosayno.adapters.memory import InMemoryCacheStore

TestingFactory = Callable[..., Callable[[], Any]]


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("millis", "expected"),
    [(0, "0s"), (59_999, "59s"), (60_000, "1m 0s"), (3_599_000, "59m 59s"), (3_600_000, "1h 0m"), (90_061_000, "25h 1m")],
)
def test_format_age(millis: int, expected: str) -> None:
    assert format_age(millis) == expected


@pytest.mark.os_agnostic
def test_show_empty_cache_exits_not_found(cli_runner: CliRunner, testing_factory: TestingFactory) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["cache-show"], obj=testing_factory())

    assert result.exit_code == 2
    assert "No cached reason." in result.stderr
    assert result.stdout == ""


@pytest.mark.os_agnostic
def test_show_prints_reason_and_age(cli_runner: CliRunner, testing_factory: TestingFactory) -> None:
    cache = InMemoryCacheStore()
    cache.write("Cached no.")

    result = cli_runner.invoke(cli_mod.cli, ["cache-show"], obj=testing_factory(cache=cache))

    assert result.exit_code == 0
    assert result.stdout == "Cached no.\n"
    assert "(cached " in result.stderr
    assert "stale" not in result.stderr


@pytest.mark.os_agnostic
def test_show_flags_stale_entries(cli_runner: CliRunner, testing_factory: TestingFactory, clock: Any) -> None:
    cache = InMemoryCacheStore(max_age_millis=1_000, clock=clock)
    cache.write("Old no.")
    clock.advance(5_000)

    result = cli_runner.invoke(cli_mod.cli, ["cache-show"], obj=testing_factory(cache=cache))

    assert result.exit_code == 0
    assert ", stale)" in result.stderr


@pytest.mark.os_agnostic
def test_show_json(cli_runner: CliRunner, testing_factory: TestingFactory, clock: Any) -> None:
    cache = InMemoryCacheStore(clock=clock)
    cache.write("Cached no.")

    result = cli_runner.invoke(cli_mod.cli, ["cache-show", "--json"], obj=testing_factory(cache=cache))

    payload = orjson.loads(result.stdout)
    assert result.exit_code == 0
    assert payload["reason"] == "Cached no."
    assert payload["written_at_millis"] == clock.now
    assert payload["stale"] is False
    assert set(payload) == {"reason", "written_at_millis", "age_millis", "stale"}


@pytest.mark.os_agnostic
def test_show_never_fetches(cli_runner: CliRunner, testing_factory: TestingFactory) -> None:
    from howtosayno.adapters.memory import ScriptedReasonFetcher

    fetcher = ScriptedReasonFetcher("Fresh")

    cli_runner.invoke(cli_mod.cli, ["cache-show"], obj=testing_factory(fetcher=fetcher))

    assert fetcher.calls == 0


@pytest.mark.os_agnostic
def test_clear_removes_entry(cli_runner: CliRunner, testing_factory: TestingFactory) -> None:
    cache = InMemoryCacheStore()
    cache.write("Cached no.")

    result = cli_runner.invoke(cli_mod.cli, ["cache-clear"], obj=testing_factory(cache=cache))

    assert result.exit_code == 0
    assert result.stdout == "Cache cleared.\n"
    assert cache.read() is None


@pytest.mark.os_agnostic
def test_clear_on_empty_cache_succeeds(cli_runner: CliRunner, testing_factory: TestingFactory) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["cache-clear"], obj=testing_factory())

    assert result.exit_code == 0


@pytest.mark.os_agnostic
def test_invalid_cache_section_exits_with_config_error(
    cli_runner: CliRunner, inject_config: Callable[[Config], Callable[[], Any]]
) -> None:
    config = Config({"cache": {"max_age_seconds": -1}}, {})

    result = cli_runner.invoke(cli_mod.cli, ["cache-show"], obj=inject_config(config))

    assert result.exit_code == 78
    assert "Invalid [cache] configuration" in result.stderr


@pytest.mark.os_agnostic
def test_file_cache_round_trip_through_cli(
    cli_runner: CliRunner, inject_config: Callable[[Config], Callable[[], Any]], tmp_path: Any
) -> None:
    (tmp_path / "no_reason_cache.json").write_bytes(b'{"cached_reason": "On disk.", "cache_timestamp": 1}')
    factory = inject_config(Config({"cache": {"directory": str(tmp_path)}}, {}))

    shown = cli_runner.invoke(cli_mod.cli, ["cache-show"], obj=factory)
    cleared = cli_runner.invoke(cli_mod.cli, ["cache-clear"], obj=factory)
    after = cli_runner.invoke(cli_mod.cli, ["cache-show"], obj=factory)

    assert shown.stdout == "On disk.\n"
    assert ", stale)" in shown.stderr
    assert cleared.exit_code == 0
    assert after.exit_code == 2
