"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """The ``[greeter]`` configuration section is malformed.

    Raised when configured greeter settings fail validation, for example an
    unknown key or a blank greeting. Caught at the CLI boundary and mapped
    to the configuration exit code.

    Example:
        >>> from greeter.domain.errors import ConfigurationError
        >>> err = ConfigurationError("greeter.greeting must not be blank")
        >>> str(err)
        'greeter.greeting must not be blank'
    """


class InvalidGreetingError(ValueError):
    """A greeting text that cannot be used.

    Raised by :class:`greeter.domain.greeter.Greeter` for empty or
    whitespace-only greetings. Inherits from ValueError so generic
    ``except ValueError`` handlers keep working.

    Example:
        >>> err = InvalidGreetingError("greeting must not be blank")
        >>> isinstance(err, ValueError)
        True
    """


__all__ = [
    "ConfigurationError",
    "InvalidGreetingError",
]
