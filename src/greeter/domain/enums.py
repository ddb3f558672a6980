"""Enums shared by the configuration commands."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """How ``greeter config`` renders the merged configuration.

    The str base lets members compare equal to the raw Click choice.

    Example:
        >>> OutputFormat("json") is OutputFormat.JSON
        True
    """

    HUMAN = "human"
    JSON = "json"


class DeployTarget(str, Enum):
    """Layer that ``greeter config-deploy`` writes the default file into.

    ``APP`` and ``HOST`` are system-wide and usually need privileges;
    ``USER`` lands in the per-user configuration directory.

    Example:
        >>> DeployTarget("user") == "user"
        True
    """

    APP = "app"
    HOST = "host"
    USER = "user"


__all__ = [
    "DeployTarget",
    "OutputFormat",
]
