"""In-memory configuration adapters for testing.

Satisfy the configuration ports without touching the filesystem. The
returned Config carries the same sections as the bundled defaults, with the
cache pointed at a throwaway temp directory.
"""

from __future__ import annotations

import tempfile
from collections.abc import Sequence
from pathlib import Path

from lib_layered_config import Config

from ...domain.enums import DeployTarget, OutputFormat


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return a Config with default ``[reason_api]`` and a temp-dir ``[cache]``."""
    return Config(
        {
            "reason_api": {"base_url": "https://naas.isalman.dev/", "path": "no"},
            "cache": {"directory": tempfile.mkdtemp(prefix="howtosayno-cache-")},
        },
        {},
    )


def get_default_config_path_in_memory() -> Path:
    """Return a synthetic path (not a real file)."""
    return Path(tempfile.gettempdir()) / "howtosayno" / "defaultconfig.toml"


def deploy_configuration_in_memory(
    *,
    targets: Sequence[DeployTarget],
    force: bool = False,
    profile: str | None = None,
) -> list[Path]:
    """Pretend to deploy; nothing is written."""
    return []


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display."""


__all__ = [
    "deploy_configuration_in_memory",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
]
