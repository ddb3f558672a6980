"""The greeting holder and its pure text composition."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidGreetingError

DEFAULT_GREETING = "Hello"
DEFAULT_NAME = "World"


@dataclass(frozen=True, slots=True)
class Greeter:
    """Immutable holder for a single greeting text.

    The greeting is stored verbatim; only empty or whitespace-only values
    are rejected.

    Attributes:
        greeting: Text placed in front of the greeted thing.

    Example:
        >>> Greeter("Hi").greeting_for("Rust")
        'Hi Rust'
        >>> Greeter("   ")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidGreetingError: greeting must not be blank
    """

    greeting: str

    def __post_init__(self) -> None:
        if not self.greeting.strip():
            raise InvalidGreetingError("greeting must not be blank")

    def greeting_for(self, thing: str) -> str:
        """Return the greeting followed by a single space and ``thing``.

        Args:
            thing: Whatever is being greeted. Not validated; may be empty.

        Returns:
            The composed greeting line without a trailing newline.

        Example:
            >>> Greeter("Hello").greeting_for("David")
            'Hello David'
        """
        return f"{self.greeting} {thing}"


def build_greeting(name: str = DEFAULT_NAME, greeting: str = DEFAULT_GREETING) -> str:
    """Return the greeting line for ``name`` without building a Greeter by hand.

    Example:
        >>> build_greeting()
        'Hello World'
        >>> build_greeting("David")
        'Hello David'
    """
    return Greeter(greeting).greeting_for(name)


__all__ = [
    "DEFAULT_GREETING",
    "DEFAULT_NAME",
    "Greeter",
    "build_greeting",
]
