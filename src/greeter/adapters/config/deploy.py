"""Copy ``defaultconfig.toml`` into the app, host or user configuration layer."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import Any

from lib_layered_config import deploy_config
from lib_layered_config.examples.deploy import DeployAction

from greeter import __init__conf__
from greeter.adapters.config.loader import get_default_config_path, validate_profile
from greeter.domain.enums import DeployTarget

_WRITTEN = frozenset({DeployAction.CREATED, DeployAction.OVERWRITTEN})


def _written_paths(results: Iterable[Any]) -> Iterator[Path]:
    """Yield destinations that were actually written, ``config.d`` files included."""
    for result in results:
        for outcome in (result, *result.dot_d_results):
            if outcome.action in _WRITTEN:
                yield outcome.destination


def deploy_configuration(
    *,
    targets: Sequence[DeployTarget],
    force: bool = False,
    profile: str | None = None,
    set_permissions: bool = True,
    dir_mode: int | None = None,
    file_mode: int | None = None,
) -> list[Path]:
    r"""Write the bundled greeter defaults into each requested layer.

    Args:
        targets: Layers to write.
        force: Replace files that already exist.
        profile: Write below ``profile/<name>/`` instead of the layer root.
        set_permissions: chmod to the library defaults (755/644 system,
            700/600 user) unless ``dir_mode``/``file_mode`` say otherwise.
        dir_mode: Directory mode used for every target.
        file_mode: File mode used for every target.

    Returns:
        Files created or overwritten, in target order. Existing files left
        alone are not listed, so an empty list means nothing changed.

    Raises:
        PermissionError: The app or host layer is not writable.
        ValueError: ``profile`` is not a valid profile name.

    Note:
        The user layer without a profile resolves to
        ``~/.config/greeter/config.toml`` on Linux,
        ``~/Library/Application Support/greeter-project/Greeter/config.toml``
        on macOS and ``%APPDATA%\greeter-project\Greeter\config.toml`` on
        Windows.
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
        set_permissions=set_permissions,
        dir_mode=dir_mode,
        file_mode=file_mode,
    )
    return list(_written_paths(results))


__all__ = ["deploy_configuration"]
