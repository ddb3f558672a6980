"""The ``greeter`` command group and its global options."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import rich_click as click

from greeter import __init__conf__
from greeter.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from greeter.composition import AppServices


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    __init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Print the full Python traceback when a command fails")
@click.option("--profile", default=None, help="Read configuration from the named profile (e.g. 'staging')")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value for this run; repeatable (e.g. greeter.greeting=Howdy)",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Resolve configuration and logging once, then run the subcommand.

    Click hands over the services factory as ``ctx.obj``; subcommands find
    a :class:`~greeter.adapters.cli.context.CLIContext` there instead.

    Example:
        >>> from click.testing import CliRunner
        >>> from greeter.composition import build_production
        >>> CliRunner().invoke(cli, ["greet", "David"], obj=build_production).stdout
        'Hello David\\n'
    """
    factory: Callable[[], AppServices] | object = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = factory()  # type: ignore[assignment]

    try:
        config = apply_overrides(services.get_config(profile=profile), set_overrides)
    except (TypeError, ValueError) as exc:
        raise click.UsageError(str(exc)) from exc

    services.init_logging(config)
    store_cli_context(
        ctx,
        CLIContext(
            traceback=traceback,
            config=config,
            services=services,
            profile=profile,
            set_overrides=set_overrides,
        ),
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    # The command modules import this package, so they are loaded after ``cli`` exists.
    from .commands import cli_config, cli_config_deploy, cli_config_generate_examples, cli_greet, cli_info

    for command in (cli_greet, cli_info, cli_config, cli_config_deploy, cli_config_generate_examples):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
