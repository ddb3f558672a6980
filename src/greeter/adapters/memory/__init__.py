"""Stand-ins for every port that stay inside the process.

:func:`greeter.composition.build_testing` wires these together. None of them
touch the filesystem, stdout or the lib_log_rich runtime.
"""

from __future__ import annotations

from .config import (
    deploy_configuration_in_memory,
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
)
from .greeting import GreetingSpy, load_greeter_settings_in_memory
from .logging import init_logging_in_memory

__all__ = [
    "GreetingSpy",
    "deploy_configuration_in_memory",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
    "load_greeter_settings_in_memory",
]
