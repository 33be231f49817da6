"""lib_log_rich runtime initialisation shared by every entry point.

Contents:
    * :class:`LoggingConfigModel` - Boundary model of the ``[lib_log_rich]`` section.
    * :func:`init_logging` - Idempotent runtime initialisation.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from howtosayno import __init__conf__


class LoggingConfigModel(BaseModel):
    """``[lib_log_rich]`` section; unknown keys pass through to RuntimeConfig.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel(console_level="DEBUG").model_dump(exclude_none=True)["console_level"]
        'DEBUG'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    section: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", section) if section else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Initialise lib_log_rich once per process and bridge stdlib logging into it.

    ``.env`` files are loaded first so ``LOG_*`` variables take effect. Later
    calls return immediately.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = ["LoggingConfigModel", "init_logging"]
