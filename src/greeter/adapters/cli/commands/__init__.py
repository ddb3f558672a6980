"""CLI command implementations registered on the root group.

Contents:
    * Greeting command from :mod:`.greet`
    * Info command from :mod:`.info`
    * Config commands from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config, cli_config_deploy, cli_config_generate_examples
from .greet import cli_greet
from .info import cli_info

__all__ = [
    "cli_config",
    "cli_config_deploy",
    "cli_config_generate_examples",
    "cli_greet",
    "cli_info",
]
