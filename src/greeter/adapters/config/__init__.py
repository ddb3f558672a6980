"""Configuration adapter - loading, deployment, display, and overrides.

Contents:
    * :mod:`.loader` - Cached layered configuration loading
    * :mod:`.deploy` - Copy the default file into app/host/user layers
    * :mod:`.display` - Human/JSON rendering of the merged configuration
    * :mod:`.overrides` - ``--set`` parsing and merging
    * :mod:`.permissions` - Deployment permission defaults
"""

from __future__ import annotations

from .deploy import deploy_configuration
from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides

__all__ = [
    "apply_overrides",
    "deploy_configuration",
    "display_config",
    "get_config",
    "get_default_config_path",
]
