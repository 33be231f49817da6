"""Typed settings for the ``[reason_api]`` and ``[cache]`` sections.

Sections are parsed once at the boundary into frozen Pydantic models; any
validation problem is re-raised as
:class:`~howtosayno.domain.errors.ConfigurationError` naming the section.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, TypeVar, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from howtosayno import __init__conf__
from howtosayno.domain.errors import ConfigurationError

_ModelT = TypeVar("_ModelT", bound=BaseModel)


class ReasonApiSettings(BaseModel):
    """Where and how patiently to ask for a reason.

    Example:
        >>> settings = ReasonApiSettings(read_timeout="5")
        >>> settings.read_timeout
        5.0
        >>> settings.base_url
        'https://naas.isalman.dev/'
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    base_url: str = "https://naas.isalman.dev/"
    path: str = "no"
    connect_timeout: float = Field(default=15.0, gt=0)
    read_timeout: float = Field(default=30.0, gt=0)
    write_timeout: float = Field(default=30.0, gt=0)

    @field_validator("base_url")
    @classmethod
    def _require_http_url(cls, value: str) -> str:
        """Reject anything that is not an http(s) URL."""
        stripped = value.strip()
        if not stripped.startswith(("http://", "https://")):
            raise ValueError(f"base_url must start with http:// or https://, got {value!r}")
        return stripped


class CacheSettings(BaseModel):
    """Location and freshness window of the persisted reason.

    An empty ``directory`` selects the per-user cache directory.

    Example:
        >>> CacheSettings(max_age_seconds=60).max_age_millis
        60000
        >>> CacheSettings(directory="  ").directory is None
        True
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    directory: Path | None = None
    namespace: str = Field(default="no_reason_cache", min_length=1, pattern=r"^[A-Za-z0-9_.-]+$")
    max_age_seconds: int = Field(default=3600, gt=0)

    @field_validator("directory", mode="before")
    @classmethod
    def _empty_directory_means_default(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def max_age_millis(self) -> int:
        return self.max_age_seconds * 1000

    def resolved_directory(self) -> Path:
        """Return the configured directory or ``$XDG_CACHE_HOME/<slug>`` (``~/.cache/<slug>``)."""
        if self.directory is not None:
            return self.directory.expanduser()
        base = os.environ.get("XDG_CACHE_HOME", "").strip()
        root = Path(base) if base else Path.home() / ".cache"
        return root / __init__conf__.LAYEREDCONF_SLUG


def _load_section(config: Config, section: str, model: type[_ModelT]) -> _ModelT:
    raw: object = config.get(section, default={})
    if raw and not isinstance(raw, dict):
        raise ConfigurationError(f"[{section}] must be a table, got {type(raw).__name__}")
    try:
        return model.model_validate(cast("dict[str, object]", raw) if raw else {})
    except ValidationError as exc:
        problems = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
        raise ConfigurationError(f"Invalid [{section}] configuration: {problems}") from exc


def load_reason_api_settings(config: Config) -> ReasonApiSettings:
    """Parse ``[reason_api]``; missing keys fall back to the built-in defaults.

    Example:
        >>> cfg = Config({"reason_api": {"path": "nope"}}, {})
        >>> load_reason_api_settings(cfg).path
        'nope'
    """
    return _load_section(config, "reason_api", ReasonApiSettings)


def load_cache_settings(config: Config) -> CacheSettings:
    """Parse ``[cache]``.

    Raises:
        ConfigurationError: When a value is out of range or malformed.

    Example:
        >>> load_cache_settings(Config({"cache": {"max_age_seconds": 0}}, {}))  # doctest: +ELLIPSIS
        Traceback (most recent call last):
        ...
        howtosayno.domain.errors.ConfigurationError: Invalid [cache] configuration: max_age_seconds: ...
    """
    return _load_section(config, "cache", CacheSettings)


__all__ = [
    "CacheSettings",
    "ReasonApiSettings",
    "load_cache_settings",
    "load_reason_api_settings",
]
