"""Greeting ports that capture output instead of printing it.

Contents:
    * :class:`GreetingSpy` - Captures emitted greeting lines.
    * :func:`load_greeter_settings_in_memory` - Settings loader without logging side effects.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..greeting.settings import GreeterSettings, load_greeter_settings


@dataclass
class GreetingSpy:
    """Records greeting lines instead of printing them.

    Create one spy per test to keep captured lines isolated.

    Attributes:
        emitted: Lines received, in order.
        raise_exception: When set, :meth:`emit_greeting` raises it after recording.

    Example:
        >>> spy = GreetingSpy()
        >>> spy.emit_greeting("Hello David")
        >>> spy.emitted
        ['Hello David']
    """

    emitted: list[str] = field(default_factory=list)
    raise_exception: Exception | None = None

    def clear(self) -> None:
        """Forget captured lines and any configured failure."""
        self.emitted.clear()
        self.raise_exception = None

    def emit_greeting(self, text: str) -> None:
        """Record ``text``; raise the configured exception if any."""
        self.emitted.append(text)
        if self.raise_exception is not None:
            raise self.raise_exception


def load_greeter_settings_in_memory(config_dict: Mapping[str, Any]) -> GreeterSettings:
    """Parse the settings with the production rules; nothing else is stubbed."""
    return load_greeter_settings(config_dict)


__all__ = [
    "GreetingSpy",
    "load_greeter_settings_in_memory",
]
