"""Permission defaults for ``config-deploy``.

Reads ``[lib_layered_config.default_permissions]`` and falls back to the
library's own modes for anything missing or unparsable.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lib_layered_config import (
    DEFAULT_APP_DIR_MODE,
    DEFAULT_APP_FILE_MODE,
    DEFAULT_USER_DIR_MODE,
    DEFAULT_USER_FILE_MODE,
)

from greeter.domain.enums import DeployTarget

if TYPE_CHECKING:
    from lib_layered_config import Config

logger = logging.getLogger(__name__)


def parse_mode(value: int | str, default: int) -> int:
    """Read a permission mode given as int, ``"755"`` or ``"0o755"``.

    Example:
        >>> parse_mode("0o750", 0o755) == parse_mode("750", 0o755) == 0o750
        True
        >>> parse_mode("rwx", 0o700) == 0o700
        True
    """
    if isinstance(value, int):
        return value
    try:
        return int(value, 0) if value.startswith("0o") else int(value, 8)
    except ValueError:
        logger.warning("Invalid permission mode '%s', falling back to default %o", value, default)
        return default


def _get_mode(section: dict[str, int | str | bool], key: str, default: int) -> int:
    raw = section.get(key, default)
    # bool is an int subclass; treat it as "not configured"
    if isinstance(raw, bool):
        return default
    return parse_mode(raw, default)


_FALLBACK_MODES: dict[str, int] = {
    "app_directory": DEFAULT_APP_DIR_MODE,
    "app_file": DEFAULT_APP_FILE_MODE,
    "host_directory": DEFAULT_APP_DIR_MODE,
    "host_file": DEFAULT_APP_FILE_MODE,
    "user_directory": DEFAULT_USER_DIR_MODE,
    "user_file": DEFAULT_USER_FILE_MODE,
}


def get_permission_defaults(config: Config) -> dict[str, int | bool]:
    """Return per-layer directory/file modes and the ``enabled`` switch.

    The host layer shares the app layer's world-readable defaults.

    Example:
        >>> from lib_layered_config import Config
        >>> defaults = get_permission_defaults(Config({}, {}))
        >>> defaults["user_file"] == 0o600, defaults["enabled"]
        (True, True)
    """
    section = config.get("lib_layered_config", {}).get("default_permissions", {})
    modes: dict[str, int | bool] = {key: _get_mode(section, key, fallback) for key, fallback in _FALLBACK_MODES.items()}
    modes["enabled"] = section.get("enabled", True)
    return modes


def get_modes_for_target(
    target: DeployTarget,
    config: Config,
    dir_mode_override: int | None = None,
    file_mode_override: int | None = None,
) -> tuple[int, int]:
    """Return ``(dir_mode, file_mode)`` for one deploy target.

    Explicit overrides (``--dir-mode``/``--file-mode``) win over the
    configured ``<layer>_directory``/``<layer>_file`` values.

    Example:
        >>> from lib_layered_config import Config
        >>> config = Config({"lib_layered_config": {"default_permissions": {"user_file": "0o640"}}}, {})
        >>> get_modes_for_target(DeployTarget.USER, config) == (0o700, 0o640)
        True
        >>> get_modes_for_target(DeployTarget.APP, config, file_mode_override=0o600) == (0o755, 0o600)
        True
    """
    defaults = get_permission_defaults(config)
    layer = target.value
    dir_mode = dir_mode_override if dir_mode_override is not None else int(defaults[f"{layer}_directory"])
    file_mode = file_mode_override if file_mode_override is not None else int(defaults[f"{layer}_file"])
    return dir_mode, file_mode


__all__ = [
    "get_modes_for_target",
    "get_permission_defaults",
    "parse_mode",
]
