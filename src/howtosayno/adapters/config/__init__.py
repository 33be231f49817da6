"""Configuration adapter - loading, deployment, display, overrides and settings.

Contents:
    * :mod:`.loader` - Layered configuration loading with caching
    * :mod:`.deploy` - Deployment of the bundled defaults to app/host/user layers
    * :mod:`.display` - Human/JSON display of the merged configuration
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.settings` - Typed ``[reason_api]`` and ``[cache]`` settings
"""

from __future__ import annotations

from .deploy import deploy_configuration
from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides
from .settings import CacheSettings, ReasonApiSettings, load_cache_settings, load_reason_api_settings

__all__ = [
    "CacheSettings",
    "ReasonApiSettings",
    "apply_overrides",
    "deploy_configuration",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_cache_settings",
    "load_reason_api_settings",
]
