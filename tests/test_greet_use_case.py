"""Application stories: the greet use case and its output port."""

from __future__ import annotations

import pytest

from greeter.adapters.memory import GreetingSpy
from greeter.application.greet import greet
from greeter.domain.greeter import Greeter


@pytest.mark.os_agnostic
def test_greet_emits_the_composed_line_once() -> None:
    """Exactly one line reaches the output port."""
    spy = GreetingSpy()

    greet(Greeter("Hello"), "David", emit=spy.emit_greeting)

    assert spy.emitted == ["Hello David"]


@pytest.mark.os_agnostic
def test_greet_returns_what_it_emitted() -> None:
    """The return value matches the emitted text."""
    spy = GreetingSpy()

    result = greet(Greeter("Hi"), "Rust", emit=spy.emit_greeting)

    assert result == spy.emitted[0] == "Hi Rust"


@pytest.mark.os_agnostic
def test_greet_propagates_output_failures() -> None:
    """An exception from the port is not swallowed."""
    spy = GreetingSpy(raise_exception=OSError("stdout closed"))

    with pytest.raises(OSError, match="stdout closed"):
        greet(Greeter("Hello"), "David", emit=spy.emit_greeting)


@pytest.mark.os_agnostic
def test_greeting_spy_clear_resets_state() -> None:
    """clear() forgets lines and the configured failure."""
    spy = GreetingSpy(raise_exception=RuntimeError("boom"))
    with pytest.raises(RuntimeError):
        spy.emit_greeting("Hello World")

    spy.clear()

    assert spy.emitted == []
    assert spy.raise_exception is None


@pytest.mark.os_agnostic
def test_console_adapter_writes_line_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    """The production output port prints the line plus newline."""
    from greeter.adapters.greeting.console import emit_greeting

    emit_greeting("Hello David")

    assert capsys.readouterr().out == "Hello David\n"
