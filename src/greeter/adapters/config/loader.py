"""Read greeter's layered configuration through lib_layered_config.

Layers, lowest first: bundled defaults, app, host, user, ``.env``, environment.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from greeter import __init__conf__


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names lib_layered_config would refuse.

    Raises:
        ValueError: ``profile`` is empty, too long, reserved, or contains path
            separators.

    Examples:
        >>> validate_profile("staging")

        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH if max_length is None else max_length)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Path of ``defaultconfig.toml`` shipped inside the package.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


class ConfigLoader(Protocol):
    """``get_config`` plus the ``cache_clear`` tests rely on."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


@lru_cache(maxsize=4)
def _read_layers(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _load(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration, optionally for ``profile``.

    Each ``(profile, start_dir)`` pair is read once per process. With a
    profile every layer path gains a ``profile/<name>/`` segment, e.g.
    ``~/.config/greeter/profile/test/config.toml`` on Linux. ``start_dir``
    seeds the upward ``.env`` search and defaults to the working directory.

    Raises:
        ValueError: ``profile`` is not a valid profile name.

    Example:
        >>> get_config().get("greeter", default={}).get("greeting")
        'Hello'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile=profile, start_dir=start_dir)


_load.cache_clear = _read_layers.cache_clear  # type: ignore[attr-defined]
get_config = cast(ConfigLoader, _load)


__all__ = [
    "ConfigLoader",
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
