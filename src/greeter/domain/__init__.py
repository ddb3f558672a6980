"""Domain layer - pure greeting logic with no I/O or framework dependencies.

Contents:
    * :mod:`.greeter` - The Greeter holder and greeting composition
    * :mod:`.enums` - Domain enumerations (OutputFormat, DeployTarget)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import DeployTarget, OutputFormat
from .errors import ConfigurationError, InvalidGreetingError
from .greeter import DEFAULT_GREETING, DEFAULT_NAME, Greeter, build_greeting

__all__ = [
    # Greeter
    "DEFAULT_GREETING",
    "DEFAULT_NAME",
    "Greeter",
    "build_greeting",
    # Enums
    "DeployTarget",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "InvalidGreetingError",
]
