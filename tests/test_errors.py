"""Domain error types: instantiation and message preservation."""

from __future__ import annotations

import pytest

from greeter.domain.errors import ConfigurationError, InvalidGreetingError


@pytest.mark.os_agnostic
def test_configuration_error_preserves_message() -> None:
    """Instantiation stores the message for display."""
    exc = ConfigurationError("greeter.greting: Extra inputs are not permitted")
    assert str(exc) == "greeter.greting: Extra inputs are not permitted"


@pytest.mark.os_agnostic
def test_invalid_greeting_error_preserves_message() -> None:
    """Instantiation stores the validation detail."""
    exc = InvalidGreetingError("greeting must not be blank")
    assert str(exc) == "greeting must not be blank"


@pytest.mark.os_agnostic
def test_invalid_greeting_error_is_value_error() -> None:
    """Generic ValueError handlers still catch InvalidGreetingError."""
    with pytest.raises(ValueError, match="blank"):
        raise InvalidGreetingError("blank")


@pytest.mark.os_agnostic
def test_configuration_error_is_not_a_value_error() -> None:
    """Configuration problems are kept apart from bad option values."""
    assert not issubclass(ConfigurationError, ValueError)
