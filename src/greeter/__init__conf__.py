"""Static package metadata surfaced to the CLI and configuration layers.

Keeps the project name, version, and the vendor/app/slug triple used by
lib_layered_config in one place so the CLI help, ``info`` output, and
configuration discovery agree.

Contents:
    * Metadata constants (``name``, ``title``, ``version``, ...).
    * ``LAYEREDCONF_*`` identifiers for configuration paths.
    * :func:`print_info` - Render the metadata block.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "greeter"
title: Final[str] = "Print a configurable greeting for a name"
version: Final[str] = "1.0.0"
homepage: Final[str] = "https://github.com/greeter-project/greeter"
author: Final[str] = "Greeter Developers"
author_email: Final[str] = "dev@greeter-project.org"
shell_command: Final[str] = "greeter"

#: Vendor, application, and slug identifiers for lib_layered_config paths.
LAYEREDCONF_VENDOR: Final[str] = "greeter-project"
LAYEREDCONF_APP: Final[str] = "Greeter"
LAYEREDCONF_SLUG: Final[str] = "greeter"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for greeter:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
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
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
