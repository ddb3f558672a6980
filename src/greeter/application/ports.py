"""Callable Protocols the application layer depends on.

Each Protocol is a ``__call__`` signature. Plain adapter functions (and the
in-memory stand-ins) match structurally, so nothing here subclasses them.
``Config`` and ``GreeterSettings`` are only imported for type checking and
never at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import DeployTarget, OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.greeting.settings import GreeterSettings


class GetConfig(Protocol):
    """Merged configuration for an optional profile."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Location of the packaged defaults file."""

    def __call__(self) -> Path: ...


class DeployConfiguration(Protocol):
    """Copy the defaults into configuration layers; returns written paths."""

    def __call__(
        self,
        *,
        targets: Sequence[DeployTarget],
        force: bool = ...,
        profile: str | None = ...,
        set_permissions: bool = ...,
        dir_mode: int | None = ...,
        file_mode: int | None = ...,
    ) -> list[Path]: ...


class DisplayConfig(Protocol):
    """Print configuration as human-readable text or JSON."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Start logging from the [lib_log_rich] section."""

    def __call__(self, config: Config) -> None: ...


class LoadGreeterSettings(Protocol):
    """Parse the ``[greeter]`` section out of a configuration mapping."""

    def __call__(self, config_dict: Mapping[str, Any]) -> GreeterSettings: ...


class EmitGreeting(Protocol):
    """Deliver one composed greeting line to the user."""

    def __call__(self, text: str) -> None: ...


__all__ = [
    "DeployConfiguration",
    "DisplayConfig",
    "EmitGreeting",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadGreeterSettings",
]
