"""``--set SECTION.KEY=VALUE`` overrides layered on top of the loaded Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed ``--set`` argument."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def coerce_value(raw: str) -> CoercedValue:
    """Interpret ``raw`` as JSON where possible, otherwise keep the string.

    Examples:
        >>> coerce_value("12.5"), coerce_value("false"), coerce_value("null")
        (12.5, False, None)
        >>> coerce_value("https://naas.isalman.dev/")
        'https://naas.isalman.dev/'
    """
    if not raw:
        return ""
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    The first ``=`` ends the path, the first ``.`` ends the section name.

    Raises:
        ValueError: Missing ``=``, missing section dot, or an empty path component.

    Examples:
        >>> parse_override("reason_api.read_timeout=5")
        ConfigOverride(section='reason_api', key_path=('read_timeout',), value=5)
        >>> parse_override("cache.directory=/tmp/x=y").value
        '/tmp/x=y'
    """
    path, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    section, dot, rest = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    key_path = tuple(rest.split("."))
    if not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")
    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value))


def _merge_into(tree: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    node: dict[str, object] = tree.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every override deep-merged in.

    Later overrides of the same key win. An empty tuple returns ``config`` itself.

    Examples:
        >>> cfg = Config({"cache": {"namespace": "a"}}, {})
        >>> apply_overrides(cfg, ("cache.namespace=b",))["cache"]["namespace"]
        'b'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config
    tree: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _merge_into(tree, parse_override(raw))
    return config.with_overrides(tree)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
