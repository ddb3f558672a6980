"""Per-invocation CLI state and the lib_cli_exit_tools traceback switches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from greeter.composition import AppServices


class TracebackState(NamedTuple):
    """The two lib_cli_exit_tools flags ``--traceback`` toggles together."""

    enabled: bool
    force_color: bool


@dataclass(slots=True)
class CLIContext:
    """What the root group resolved once for all subcommands.

    ``set_overrides`` keeps the raw ``--set`` strings so a subcommand that
    reloads configuration for another profile can apply them again.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def store_cli_context(ctx: click.Context, state: CLIContext) -> None:
    """Replace ``ctx.obj`` (the services factory) with ``state``."""
    ctx.obj = state


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the state stored by the root group.

    Raises:
        RuntimeError: The root group has not run for this context.

    Example:
        >>> ctx = click.Context(click.Command("greet"))
        >>> ctx.obj = CLIContext(traceback=False, config=Config({}, {}), services=None)  # type: ignore[arg-type]
        >>> get_cli_context(ctx).profile is None
        True
    """
    if isinstance(ctx.obj, CLIContext):
        return ctx.obj
    raise RuntimeError("CLI context not initialized. Call store_cli_context first.")


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off for lib_cli_exit_tools."""
    restore_traceback_state(TracebackState(bool(enabled), bool(enabled)))


def snapshot_traceback_state() -> TracebackState:
    """Read the current lib_cli_exit_tools traceback flags.

    Example:
        >>> apply_traceback_preferences(False)
        >>> snapshot_traceback_state()
        TracebackState(enabled=False, force_color=False)
    """
    config = lib_cli_exit_tools.config
    return TracebackState(
        bool(getattr(config, "traceback", False)),
        bool(getattr(config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Write flags captured by :func:`snapshot_traceback_state` back."""
    lib_cli_exit_tools.config.traceback = state.enabled
    lib_cli_exit_tools.config.traceback_force_color = state.force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
