"""Greet use case: compose a greeting and hand it to the output port."""

from __future__ import annotations

import logging

from ..domain.greeter import Greeter
from .ports import EmitGreeting

logger = logging.getLogger(__name__)


def greet(greeter: Greeter, thing: str, *, emit: EmitGreeting) -> str:
    """Compose the greeting for ``thing`` and emit it exactly once.

    Args:
        greeter: Holder providing the greeting text.
        thing: Whatever is being greeted.
        emit: Output port receiving the composed line.

    Returns:
        The emitted greeting line.

    Example:
        >>> lines: list[str] = []
        >>> greet(Greeter("Hello"), "David", emit=lines.append)
        'Hello David'
        >>> lines
        ['Hello David']
    """
    text = greeter.greeting_for(thing)
    logger.debug("Emitting greeting", extra={"greeting": greeter.greeting, "thing": thing})
    emit(text)
    return text


__all__ = ["greet"]
