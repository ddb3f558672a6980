"""The ``greet`` command: print a greeting for a name.

Contents:
    * :func:`cli_greet` - Compose and print ``"<greeting> <name>"``.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from greeter.application.greet import greet
from greeter.domain.errors import ConfigurationError, InvalidGreetingError
from greeter.domain.greeter import Greeter

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _build_greeter(cli_ctx: CLIContext, greeting: str | None) -> tuple[Greeter, str]:
    """Return the Greeter to use and the configured default name.

    ``--greeting`` wins over ``[greeter].greeting``.

    Raises:
        SystemExit: CONFIG_ERROR for a broken ``[greeter]`` section,
            INVALID_ARGUMENT for a blank ``--greeting``.
    """
    try:
        settings = cli_ctx.services.load_greeter_settings(cli_ctx.config.as_dict())
    except ConfigurationError as exc:
        logger.error("Invalid greeter configuration", extra={"error": str(exc)})
        click.echo(f"\nError: Configuration error - {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc

    if greeting is None:
        return settings.to_greeter(), settings.name
    try:
        return Greeter(greeting), settings.name
    except InvalidGreetingError as exc:
        logger.error("Rejected --greeting value", extra={"error": str(exc)})
        click.echo(f"\nError: Invalid option value - {exc}", err=True)
        raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


@click.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name", required=False)
@click.option(
    "--greeting",
    type=str,
    default=None,
    help="Greeting text placed before the name (default: [greeter].greeting)",
)
@click.pass_context
def cli_greet(ctx: click.Context, name: str | None, greeting: str | None) -> None:
    """Print the greeting followed by NAME.

    NAME defaults to [greeter].name from the configuration.
    """
    cli_ctx = get_cli_context(ctx)
    greeter, default_name = _build_greeter(cli_ctx, greeting)
    thing = name if name is not None else default_name

    extra = {"command": "greet", "greeting": greeter.greeting, "thing": thing}
    with lib_log_rich.runtime.bind(job_id="cli-greet", extra=extra):
        logger.info("Greeting", extra={"thing": thing})
        greet(greeter, thing, emit=cli_ctx.services.emit_greeting)


__all__ = ["cli_greet"]
