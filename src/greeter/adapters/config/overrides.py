"""Parse ``--set SECTION.KEY=VALUE`` options and merge them into Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Types :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed ``--set`` option."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Turn ``SECTION.KEY[.SUBKEY...]=VALUE`` into a ConfigOverride.

    Only the first ``=`` splits path from value, so values may contain ``=``.

    Raises:
        ValueError: Missing ``=``, no dot in the path, or an empty component.

    Examples:
        >>> parse_override("greeter.greeting=Howdy")
        ConfigOverride(section='greeter', key_path=('greeting',), value='Howdy')
        >>> parse_override("lib_log_rich.payload_limits.message_max_chars=8192").value
        8192
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    path, value = raw.split("=", maxsplit=1)
    if "." not in path:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *keys = path.split(".")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(keys):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=tuple(keys), value=coerce_value(value))


def coerce_value(raw: str) -> CoercedValue:
    """Read ``raw`` as JSON when possible, otherwise keep the string.

    Examples:
        >>> coerce_value("true"), coerce_value("42"), coerce_value("Howdy")
        (True, 42, 'Howdy')
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Place ``override.value`` inside ``target`` creating tables on the way.

    Raises:
        TypeError: An intermediate key already holds a non-table value.

    Example:
        >>> tree: dict[str, dict[str, object]] = {}
        >>> _nest_override(tree, ConfigOverride("greeter", ("greeting",), "Hi"))
        >>> tree
        {'greeter': {'greeting': 'Hi'}}
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    *parents, leaf = override.key_path
    for part in parents:
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[leaf] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` option deep-merged in.

    The original instance is returned untouched when there is nothing to apply.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> cfg = Config({"greeter": {"greeting": "Hello"}}, {})
        >>> apply_overrides(cfg, ("greeter.greeting=Hi",))["greeter"]["greeting"]
        'Hi'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    merged: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(merged, parse_override(raw))
    return config.with_overrides(merged)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
