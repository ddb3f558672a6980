"""Configuration ports backed by a fixed in-memory ``Config``."""

from __future__ import annotations

import tempfile
from collections.abc import Sequence
from pathlib import Path

from lib_layered_config import Config

from ...domain.enums import DeployTarget, OutputFormat

_DEFAULTS = {"greeter": {"greeting": "Hello", "name": "World"}}


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Same ``[greeter]`` defaults as ``defaultconfig.toml``, whatever the profile."""
    return Config({section: dict(values) for section, values in _DEFAULTS.items()}, {})


def get_default_config_path_in_memory() -> Path:
    # Never created on disk.
    return Path(tempfile.gettempdir()) / "greeter" / "defaultconfig.toml"


def deploy_configuration_in_memory(
    *,
    targets: Sequence[DeployTarget],
    force: bool = False,
    profile: str | None = None,
    set_permissions: bool = True,
    dir_mode: int | None = None,
    file_mode: int | None = None,
) -> list[Path]:
    """Report that no file was written."""
    return []


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Print nothing."""


__all__ = [
    "deploy_configuration_in_memory",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
]
