"""Copy the bundled configuration into the app, host or user layer."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from lib_layered_config import deploy_config
from lib_layered_config.examples.deploy import DeployAction

from howtosayno import __init__conf__
from howtosayno.adapters.config.loader import get_default_config_path, validate_profile
from howtosayno.domain.enums import DeployTarget

logger = logging.getLogger(__name__)

_WRITTEN = frozenset({DeployAction.CREATED, DeployAction.OVERWRITTEN})


def deploy_configuration(
    *,
    targets: Sequence[DeployTarget],
    force: bool = False,
    profile: str | None = None,
) -> list[Path]:
    r"""Deploy ``defaultconfig.toml`` to the requested layers.

    Existing files are left alone unless ``force`` is set. User-layer files
    are created private (700/600), app and host files world-readable.

    Returns:
        Paths that were created or overwritten; empty when nothing changed.

    Raises:
        PermissionError: Writing the app or host layer without privileges.
        ValueError: Invalid profile name.

    Note:
        Linux destinations are ``/etc/xdg/howtosayno/config.toml`` (app),
        ``/etc/xdg/howtosayno/hosts/<hostname>.toml`` (host) and
        ``~/.config/howtosayno/config.toml`` (user). macOS and Windows use
        ``<vendor>\<app>`` below their application data directories.
    """
    if profile is not None:
        validate_profile(profile)

    results = deploy_config(
        source=get_default_config_path(),
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        targets=[target.value for target in targets],
        force=force,
    )

    written: list[Path] = []
    for result in results:
        if result.action in _WRITTEN:
            written.append(result.destination)
        written.extend(extra.destination for extra in result.dot_d_results if extra.action in _WRITTEN)
    logger.info("Configuration deployed", extra={"targets": [t.value for t in targets], "written": len(written)})
    return written


__all__ = ["deploy_configuration"]
