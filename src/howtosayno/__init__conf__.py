"""Static package metadata surfaced to CLI commands and documentation.

The values mirror ``[project]`` in ``pyproject.toml``; the ``LAYEREDCONF_*``
identifiers decide where lib_layered_config looks for configuration files.
"""

from __future__ import annotations

#: Distribution name as published on the index.
name = "howtosayno"
#: Short human readable summary.
title = "Offline-first client for reasons to say no"
#: Release version, kept in sync with pyproject.toml.
version = "0.1.0"
#: Project homepage.
homepage = "https://naas.isalman.dev/"
#: Console script name.
shell_command = "howtosayno"

#: Vendor directory used on macOS and Windows.
LAYEREDCONF_VENDOR = "howtosayno"
#: Application directory used on macOS and Windows.
LAYEREDCONF_APP = "How To Say No"
#: Directory slug used on Linux (``~/.config/<slug>``).
LAYEREDCONF_SLUG = "howtosayno"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for howtosayno:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
