"""Greeting adapter - settings parsing and console output.

Contents:
    * :mod:`.settings` - ``[greeter]`` section model and loader
    * :mod:`.console` - Writes greeting lines to stdout
"""

from __future__ import annotations

from .console import emit_greeting
from .settings import GreeterSettings, load_greeter_settings

__all__ = [
    "GreeterSettings",
    "emit_greeting",
    "load_greeter_settings",
]
