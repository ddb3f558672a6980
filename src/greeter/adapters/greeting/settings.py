"""Greeter settings model and loader.

Provides the GreeterSettings Pydantic model for the ``[greeter]`` configuration
section and the loader that builds it from configuration dictionaries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from greeter.domain.errors import ConfigurationError
from greeter.domain.greeter import DEFAULT_GREETING, DEFAULT_NAME, Greeter


class GreeterSettings(BaseModel):
    """Validated, immutable ``[greeter]`` settings.

    Example:
        >>> settings = GreeterSettings(greeting="Hi")
        >>> settings.greeting, settings.name
        ('Hi', 'World')
    """

    # --set and environment values like 2024 arrive as numbers.
    model_config = ConfigDict(frozen=True, extra="forbid", coerce_numbers_to_str=True)

    greeting: str = DEFAULT_GREETING
    name: str = DEFAULT_NAME

    @field_validator("greeting")
    @classmethod
    def _reject_blank_greeting(cls, v: str) -> str:
        """Refuse greetings the domain Greeter would reject anyway.

        Examples:
            >>> GreeterSettings._reject_blank_greeting("Howdy")
            'Howdy'
        """
        if not v.strip():
            raise ValueError("greeting must not be blank")
        return v

    def to_greeter(self) -> Greeter:
        """Build the domain holder for the configured greeting.

        Example:
            >>> GreeterSettings().to_greeter()
            Greeter(greeting='Hello')
        """
        return Greeter(self.greeting)


def load_greeter_settings(config_dict: Mapping[str, Any]) -> GreeterSettings:
    """Load GreeterSettings from a configuration dictionary.

    Bridges lib_layered_config's dictionary output with the typed model.
    A missing ``greeter`` section yields the defaults.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.

    Returns:
        Validated greeter settings.

    Raises:
        ConfigurationError: If the section is not a table, has unknown keys,
            or holds invalid values.

    Example:
        >>> load_greeter_settings({"greeter": {"greeting": "Hi", "name": "Rust"}}).to_greeter().greeting_for("Rust")
        'Hi Rust'
        >>> load_greeter_settings({}).name
        'World'
    """
    section: Any = config_dict.get("greeter", {})
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[greeter] must be a table, got {type(section).__name__}")

    try:
        return GreeterSettings.model_validate(dict(cast(Mapping[str, Any], section)))
    except ValidationError as exc:
        problems = "; ".join(f"greeter.{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
        raise ConfigurationError(problems) from exc


__all__ = [
    "GreeterSettings",
    "load_greeter_settings",
]
