"""Process entry point shared by the console script and ``python -m greeter``."""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from greeter import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)

if TYPE_CHECKING:
    from greeter.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    """Print ``exc`` the lib_cli_exit_tools way and map it to an exit code."""
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _shutdown_logging() -> None:
    # Worker threads share the process-wide runtime and must leave it running.
    if threading.current_thread() is not threading.main_thread():
        return
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    # lib_cli_exit_tools.run_cli has no way to hand ``obj`` to Click, so the
    # standalone handling is done here instead.
    from .root import cli

    try:
        cli.main(
            args=list(sys.argv[1:] if argv is None else argv),
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # noqa: BLE001 - SystemExit and KeyboardInterrupt get exit codes too
        return _report_failure(exc)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run ``greeter`` with ``argv`` and return the exit code.

    Args:
        argv: Arguments after the program name; ``sys.argv[1:]`` when None.
        restore_traceback: Put the lib_cli_exit_tools traceback flags back
            the way they were before the run.
        services_factory: Builds the AppServices for this run, normally
            :func:`greeter.composition.build_production`.

    Raises:
        ValueError: ``services_factory`` is missing.

    Example:
        >>> from greeter.composition import build_production
        >>> main(["greet", "David"], services_factory=build_production)  # doctest: +SKIP
        Hello David
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    saved = snapshot_traceback_state()
    try:
        return _run_cli(argv, services_factory=services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(saved)
        _shutdown_logging()


__all__ = ["main"]
