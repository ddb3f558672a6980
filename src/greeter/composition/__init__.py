"""Composition root: the only place adapters are bound to application ports.

``build_production`` is what the console script and ``python -m greeter``
use; ``build_testing`` swaps every port for an in-memory stand-in. Tests
that need one real port and one fake build on either via
``dataclasses.replace``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config import deploy, display, loader
from ..adapters.config.loader import get_config
from ..adapters.greeting import console, settings
from ..adapters.logging import setup as logging_setup

if TYPE_CHECKING:
    from ..adapters.memory.greeting import GreetingSpy
    from ..application.ports import (
        DeployConfiguration,
        DisplayConfig,
        EmitGreeting,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadGreeterSettings,
    )


@dataclass(frozen=True, slots=True)
class AppServices:
    """Every port the CLI needs, bound to one implementation each."""

    # configuration
    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    deploy_configuration: DeployConfiguration
    display_config: DisplayConfig
    # logging
    init_logging: InitLogging
    # greeting
    load_greeter_settings: LoadGreeterSettings
    emit_greeting: EmitGreeting


def build_production() -> AppServices:
    """Bind the filesystem, stdout and lib_log_rich adapters."""
    return AppServices(
        get_config=loader.get_config,
        get_default_config_path=loader.get_default_config_path,
        deploy_configuration=deploy.deploy_configuration,
        display_config=display.display_config,
        init_logging=logging_setup.init_logging,
        load_greeter_settings=settings.load_greeter_settings,
        emit_greeting=console.emit_greeting,
    )


def build_testing(*, spy: GreetingSpy | None = None) -> AppServices:
    """Bind in-memory adapters; greetings land in ``spy``.

    A fresh :class:`GreetingSpy` is used when ``spy`` is None. Pass your own
    to assert on what was greeted.

    Example:
        >>> from greeter.adapters.memory import GreetingSpy
        >>> spy = GreetingSpy()
        >>> build_testing(spy=spy).emit_greeting("Hello David")
        >>> spy.emitted
        ['Hello David']
    """
    from ..adapters import memory

    return AppServices(
        get_config=memory.get_config_in_memory,
        get_default_config_path=memory.get_default_config_path_in_memory,
        deploy_configuration=memory.deploy_configuration_in_memory,
        display_config=memory.display_config_in_memory,
        init_logging=memory.init_logging_in_memory,
        load_greeter_settings=memory.load_greeter_settings_in_memory,
        emit_greeting=(spy if spy is not None else memory.GreetingSpy()).emit_greeting,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "get_config",
]
