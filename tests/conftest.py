"""Shared pytest fixtures for CLI and module-entry tests.

Fixtures read as plain English and are discovered implicitly by pytest.
Service injection swaps single ports on top of production wiring so the
CLI path under test stays real everywhere else.
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

if TYPE_CHECKING:
    from greeter.adapters.memory.greeting import GreetingSpy
    from greeter.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


def _production_with(**ports: Any) -> Callable[[], AppServices]:
    """Return a services factory: production wiring with ``ports`` replaced."""
    from greeter.composition import build_production

    services = dataclasses.replace(build_production(), **ports)
    return lambda: services


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for exact output checks; log lines go to stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory."""
    from greeter.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from rich output."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore them afterwards."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Start the test with an empty configuration cache."""
    from greeter.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from plain dicts without disk I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def source_info_factory() -> Callable[[str, str, str | None], SourceInfo]:
    """Create SourceInfo dicts for provenance tests."""

    def _factory(key: str, layer: str, path: str | None = None) -> SourceInfo:
        return {"layer": layer, "path": path, "key": key}

    return _factory


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function turning a config dict into a services factory.

    Only ``get_config`` is replaced; display, logging and output stay real.

    Example:
        def test_config_display(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"greeter": {"greeting": "Hi"}})
            result = cli_runner.invoke(cli, ["config"], obj=factory)
            assert "Hi" in result.output
    """

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        return _production_with(get_config=_fake_get_config)

    return _create


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records the profile it was called with."""

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        return _production_with(get_config=_capturing_get_config)

    return _inject


@pytest.fixture
def inject_deploy_configuration() -> Callable[[Callable[..., list[Path]]], Callable[[], AppServices]]:
    """Return a factory that swaps in a custom deploy_configuration."""

    def _inject(deploy_fn: Callable[..., list[Path]]) -> Callable[[], AppServices]:
        return _production_with(deploy_configuration=deploy_fn)

    return _inject


@dataclass
class GreetingCliContext:
    """Services factory plus the spy receiving emitted greetings."""

    factory: Callable[[], Any]
    spy: GreetingSpy


@pytest.fixture
def greeting_cli_context(
    clear_config_cache: None,
) -> Callable[..., GreetingCliContext]:
    """Create a CLI context whose greetings land in a GreetingSpy.

    Pass the ``[greeter]`` section contents, or None to keep the real
    layered configuration.

    Example:
        def test_greet(cli_runner, greeting_cli_context) -> None:
            ctx = greeting_cli_context({"greeting": "Hi"})
            cli_runner.invoke(cli, ["greet", "Rust"], obj=ctx.factory)
            assert ctx.spy.emitted == ["Hi Rust"]
    """
    from greeter.adapters.memory.greeting import GreetingSpy as GreetingSpyImpl

    def _create(greeter_section: dict[str, Any] | None = None) -> GreetingCliContext:
        spy = GreetingSpyImpl()
        ports: dict[str, Any] = {"emit_greeting": spy.emit_greeting}
        if greeter_section is not None:
            config = Config({"greeter": greeter_section}, {})

            def _fake_get_config(**_kwargs: Any) -> Config:
                return config

            ports["get_config"] = _fake_get_config
        return GreetingCliContext(factory=_production_with(**ports), spy=spy)

    return _create
