"""Shared pytest fixtures.

- CLI fixtures: runner, services factories, traceback-state isolation.
- Retrieval fixtures: in-memory cache, scripted fetcher, wired repository.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from howtosayno.adapters.memory import InMemoryCacheStore, ScriptedReasonFetcher
from howtosayno.application.repository import ReasonRepository
from howtosayno.application.use_cases import GetReasonUseCase

if TYPE_CHECKING:
    from howtosayno.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for integration test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, start: int = 1_000_000) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, millis: int) -> None:
        self.now += millis


@pytest.fixture(autouse=True)
def _logging_runtime() -> None:
    """Initialise the lib_log_rich runtime that CLI commands bind to.

    ``build_testing`` leaves logging untouched and ``main`` shuts the runtime
    down on exit, so each test starts from an initialised runtime.
    """
    from howtosayno.adapters.logging.setup import init_logging

    init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test."""
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory."""
    from howtosayno.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset the lib_cli_exit_tools traceback flags and restore them afterwards."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before the test."""
    from howtosayno.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from plain dicts (no provenance)."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory_cache(clock: FakeClock) -> InMemoryCacheStore:
    """Empty in-memory cache driven by the fake clock."""
    return InMemoryCacheStore(clock=clock)


@pytest.fixture
def make_use_case(memory_cache: InMemoryCacheStore) -> Callable[..., GetReasonUseCase]:
    """Wire a use case over ``memory_cache`` and a fetcher scripted with the given outcomes."""

    def _make(*outcomes: str | Exception, fetcher: ScriptedReasonFetcher | None = None) -> GetReasonUseCase:
        scripted = fetcher if fetcher is not None else ScriptedReasonFetcher(*outcomes)
        return GetReasonUseCase(ReasonRepository(memory_cache, scripted))

    return _make


@pytest.fixture
def testing_factory() -> Callable[..., Callable[[], AppServices]]:
    """Return a builder of in-memory services factories for CLI invocation.

    ``config`` replaces the in-memory configuration when given.
    """
    from howtosayno.composition import build_testing

    def _build(
        *,
        cache: InMemoryCacheStore | None = None,
        fetcher: ScriptedReasonFetcher | None = None,
        config: Config | None = None,
    ) -> Callable[[], AppServices]:
        services = build_testing(cache=cache, fetcher=fetcher)
        if config is not None:

            def _fixed_config(**_kwargs: Any) -> Config:
                return config

            services = replace(services, get_config=_fixed_config)
        return lambda: services

    return _build


@pytest.fixture
def inject_config(clear_config_cache: None) -> Callable[[Config], Callable[[], AppServices]]:
    """Return production services whose ``get_config`` yields the given Config."""
    from howtosayno.composition import build_production

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = replace(build_production(), get_config=_fake_get_config)
        return lambda: services

    return _inject
