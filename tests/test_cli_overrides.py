"""CLI --set override integration tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result

from greeter.adapters import cli as cli_mod


@pytest.mark.os_agnostic
def test_when_set_override_is_passed_config_reflects_change(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """Verify --set override is visible in config command output."""
    factory = config_cli_context({"greeter": {"greeting": "Hello"}})

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "greeter.greeting=Servus", "config", "--section", "greeter"],
        obj=factory,
    )

    assert result.exit_code == 0
    assert "Servus" in result.output


@pytest.mark.os_agnostic
def test_when_multiple_set_overrides_are_passed_all_apply(
    cli_runner: CliRunner,
    greeting_cli_context: Callable[..., Any],
) -> None:
    """Verify multiple --set options all reach the greet command."""
    ctx = greeting_cli_context({"greeting": "Hello", "name": "World"})

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "greeter.greeting=Hi", "--set", "greeter.name=Rust", "greet"],
        obj=ctx.factory,
    )

    assert result.exit_code == 0
    assert ctx.spy.emitted == ["Hi Rust"]


@pytest.mark.os_agnostic
def test_when_set_override_has_nested_key_it_works(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """Verify nested key override (SECTION.SUB.KEY=VALUE) works."""
    factory = config_cli_context({"lib_log_rich": {"payload_limits": {"message_max_chars": 4096}}})

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "lib_log_rich.payload_limits.message_max_chars=8192", "config", "--format", "json"],
        obj=factory,
    )

    assert result.exit_code == 0
    assert "8192" in result.stdout


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ("invalid_no_equals", "must contain '='"),
        ("nodot=value", "at least one dot"),
        (".greeting=Hi", "section name is empty"),
        ("greeter..greeting=Hi", "empty component"),
    ],
)
def test_when_set_override_is_malformed_it_shows_usage_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    raw: str,
    message: str,
) -> None:
    """Malformed --set values are rejected before any command runs."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["--set", raw, "greet"], obj=production_factory)

    assert result.exit_code == 2
    assert message in result.output


@pytest.mark.os_agnostic
def test_when_no_set_overrides_config_is_unchanged(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """Verify no --set leaves config unchanged."""
    factory = config_cli_context({"greeter": {"greeting": "Moin"}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--section", "greeter"], obj=factory)

    assert result.exit_code == 0
    assert "Moin" in result.output
