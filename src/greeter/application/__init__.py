"""Application layer - use cases and port definitions.

Contains the greet use case that orchestrates domain logic and the port
protocols that define the interfaces for adapter implementations.

Contents:
    * :mod:`.greet` - The greet use case
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .greet import greet
from .ports import (
    DeployConfiguration,
    DisplayConfig,
    EmitGreeting,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    LoadGreeterSettings,
)

__all__ = [
    "DeployConfiguration",
    "DisplayConfig",
    "EmitGreeting",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadGreeterSettings",
    "greet",
]
