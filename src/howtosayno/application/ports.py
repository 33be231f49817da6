"""Application ports - Protocol definitions for adapter objects and functions.

Two flavours live here:

* Object ports (:class:`CacheStore`, :class:`ReasonFetcher`) describe the
  stateful collaborators the repository composes.
* Callable ports define a ``__call__`` method whose signature exactly matches
  the corresponding adapter function. Existing module-level functions satisfy
  these protocols automatically via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters.  Infrastructure types (``Config``) are
    imported under ``TYPE_CHECKING`` only, so the application layer never
    imports an adapter library at runtime.
"""

from __future__ import annotations

from collections.abc import Generator, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import DeployTarget, OutputFormat
from ..domain.models import CacheEntry

if TYPE_CHECKING:
    from lib_layered_config import Config


class CacheStore(Protocol):
    """Single-slot persistence for the last known reason.

    Implementations never raise from ``read``/``write``/``clear``: reads fail
    open to ``None`` and write faults are swallowed.
    """

    def read(self) -> CacheEntry | None: ...

    def write(self, value: str) -> None: ...

    def clear(self) -> None: ...

    def observe(self) -> Generator[CacheEntry | None, None, None]: ...

    def is_stale(self, entry: CacheEntry) -> bool: ...


class ReasonFetcher(Protocol):
    """Sole network boundary: one request, one reason.

    ``fetch_reason`` raises :class:`~howtosayno.domain.errors.ReasonError`
    subclasses on failure and never retries.
    """

    def fetch_reason(self) -> str: ...

    def close(self) -> None: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DeployConfiguration(Protocol):
    """Deploy default configuration to specified target layers."""

    def __call__(
        self,
        *,
        targets: Sequence[DeployTarget],
        force: bool = ...,
        profile: str | None = ...,
    ) -> list[Path]: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class CreateCacheStore(Protocol):
    """Build the cache store described by the ``[cache]`` section."""

    def __call__(self, config: Config) -> CacheStore: ...


class CreateReasonFetcher(Protocol):
    """Build the remote fetcher described by the ``[reason_api]`` section."""

    def __call__(self, config: Config) -> ReasonFetcher: ...


__all__ = [
    "CacheStore",
    "CreateCacheStore",
    "CreateReasonFetcher",
    "DeployConfiguration",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "ReasonFetcher",
]
