"""CLI command implementations.

Contents:
    * Retrieval command from :mod:`.reason_cmd`
    * Cache commands from :mod:`.cache_cmd`
    * Info command from :mod:`.info`
    * Config commands from :mod:`.config`
"""

from __future__ import annotations

from .cache_cmd import cli_cache_clear, cli_cache_show
from .config import cli_config, cli_config_deploy
from .info import cli_info
from .reason_cmd import cli_reason

__all__ = [
    "cli_cache_clear",
    "cli_cache_show",
    "cli_config",
    "cli_config_deploy",
    "cli_info",
    "cli_reason",
]
