"""Public package surface exposing the Greeter, metadata, and configuration.

Routes imports through the architectural layers:
- Domain exports: the Greeter holder and greeting composition
- Application exports: the greet use case
- Composition exports: wired configuration loader
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.greet import greet

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.greeter import (
    DEFAULT_GREETING,
    DEFAULT_NAME,
    Greeter,
    build_greeting,
)

__all__ = [
    "DEFAULT_GREETING",
    "DEFAULT_NAME",
    "Greeter",
    "build_greeting",
    "get_config",
    "greet",
    "print_info",
]
