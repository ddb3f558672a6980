"""The ``config``, ``config-deploy`` and ``config-generate-examples`` commands."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config, generate_examples

from greeter import __init__conf__
from greeter.adapters.config.overrides import apply_overrides
from greeter.adapters.config.permissions import get_modes_for_target, get_permission_defaults
from greeter.domain.enums import DeployTarget, OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_profile_option = click.option(
    "--profile",
    type=str,
    default=None,
    help="Use this profile instead of the one given to greeter (e.g. 'staging')",
)


def _fail(message: str, code: ExitCode, *, hint: str | None = None) -> SystemExit:
    """Print ``message`` (and ``hint``) to stderr and build the SystemExit to raise."""
    click.echo(f"\nError: {message}", err=True)
    if hint:
        click.echo(f"Hint: {hint}", err=True)
    return SystemExit(code)


def _config_for(cli_ctx: CLIContext, profile: str | None) -> tuple[Config, str | None]:
    """Pick the configuration a subcommand works on.

    Without a subcommand ``--profile`` the root group's configuration is
    reused. With one, configuration is reloaded for that profile and the
    root group's ``--set`` values are applied again.
    """
    if not profile:
        return cli_ctx.config, cli_ctx.profile
    reloaded = cli_ctx.services.get_config(profile=profile)
    return apply_overrides(reloaded, cli_ctx.set_overrides), profile


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Render as TOML-like text (human) or JSON",
)
@click.option("--section", type=str, default=None, help="Only show this top-level table (e.g. 'greeter')")
@_profile_option
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Show the merged greeter configuration and where each value came from.

    Layers, lowest first: defaults, app, host, user, .env, environment.
    """
    cli_ctx = get_cli_context(ctx)
    config, active_profile = _config_for(cli_ctx, profile)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(
        job_id="cli-config",
        extra={"command": "config", "format": fmt.value, "profile": active_profile},
    ):
        logger.info("Displaying configuration", extra={"section": section})
        click.echo()
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=active_profile)
        except ValueError as exc:
            raise _fail(str(exc), ExitCode.INVALID_ARGUMENT) from exc


def _parse_octal_mode(ctx: click.Context, param: click.Parameter, value: str | None) -> int | None:
    """Click callback accepting ``750`` as well as ``0o750``."""
    if value is None:
        return None
    digits = value[2:] if value.startswith("0o") else value
    try:
        return int(digits, 8)
    except ValueError as exc:
        raise click.BadParameter(f"Invalid octal mode: {value}") from exc


def _print_deployed(paths: Sequence[Path], profile: str | None, set_permissions: bool) -> None:
    if not paths:
        click.echo("\nNo files were created (all target files already exist).")
        click.echo("Use --force to overwrite existing configuration files.")
        return
    suffix = f" (profile: {profile})" if profile else ""
    if not set_permissions:
        suffix += " (permissions not set)"
    click.echo(f"\nConfiguration deployed successfully{suffix}:")
    click.echo("\n".join(f"  ✓ {path}" for path in paths))


@click.command("config-deploy", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--target",
    "targets",
    type=click.Choice([t.value for t in DeployTarget], case_sensitive=False),
    multiple=True,
    required=True,
    help="Layer to write the default file into; repeat for several layers",
)
@click.option("--force", is_flag=True, default=False, help="Replace configuration files that already exist")
@_profile_option
@click.option(
    "--permissions/--no-permissions",
    "set_permissions",
    default=None,
    help="chmod deployed files (app/host 755/644, user 700/600). Defaults to [lib_layered_config.default_permissions]",
)
@click.option("--dir-mode", default=None, callback=_parse_octal_mode, help="Directory mode, e.g. 750 or 0o750")
@click.option("--file-mode", default=None, callback=_parse_octal_mode, help="File mode, e.g. 640 or 0o640")
@click.pass_context
def cli_config_deploy(
    ctx: click.Context,
    targets: tuple[str, ...],
    force: bool,
    profile: str | None,
    set_permissions: bool | None,
    dir_mode: int | None,
    file_mode: int | None,
) -> None:
    r"""Copy the bundled greeter defaults into a configuration layer.

    \b
    - app:  system-wide, for every host sharing the installation
    - host: system-wide, this machine only
    - user: ~/.config/greeter on Linux

    app and host usually need elevated privileges.
    """
    cli_ctx = get_cli_context(ctx)
    active_profile = profile or cli_ctx.profile
    layers = tuple(DeployTarget(t.lower()) for t in targets)
    if set_permissions is None:
        set_permissions = bool(get_permission_defaults(cli_ctx.config)["enabled"])

    with lib_log_rich.runtime.bind(
        job_id="cli-config-deploy",
        extra={"command": "config-deploy", "targets": [t.value for t in layers], "profile": active_profile},
    ):
        logger.info("Deploying configuration", extra={"force": force})
        written: list[Path] = []
        try:
            for layer in layers:
                layer_dir_mode, layer_file_mode = (
                    get_modes_for_target(layer, cli_ctx.config, dir_mode, file_mode)
                    if set_permissions
                    else (dir_mode, file_mode)
                )
                written.extend(
                    cli_ctx.services.deploy_configuration(
                        targets=(layer,),
                        force=force,
                        profile=active_profile,
                        set_permissions=set_permissions,
                        dir_mode=layer_dir_mode,
                        file_mode=layer_file_mode,
                    )
                )
        except PermissionError as exc:
            logger.error("Permission denied when deploying configuration", extra={"error": str(exc)})
            raise _fail(
                f"Permission denied. {exc}",
                ExitCode.PERMISSION_DENIED,
                hint="the app and host targets may require sudo.",
            ) from exc
        except Exception as exc:
            logger.error("Failed to deploy configuration", extra={"error": str(exc), "error_type": type(exc).__name__})
            raise _fail(f"Failed to deploy configuration: {exc}", ExitCode.GENERAL_ERROR) from exc
        _print_deployed(written, active_profile, set_permissions)


@click.command("config-generate-examples", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--destination",
    type=click.Path(file_okay=False),
    required=True,
    help="Directory receiving the example files",
)
@click.option("--force", is_flag=True, default=False, help="Replace example files that already exist")
def cli_config_generate_examples(destination: str, force: bool) -> None:
    """Write commented example configuration files for every layer."""
    with lib_log_rich.runtime.bind(
        job_id="cli-config-generate-examples",
        extra={"command": "config-generate-examples", "destination": destination},
    ):
        logger.info("Generating example configuration files", extra={"force": force})
        try:
            created = generate_examples(
                destination=destination,
                slug=__init__conf__.LAYEREDCONF_SLUG,
                vendor=__init__conf__.LAYEREDCONF_VENDOR,
                app=__init__conf__.LAYEREDCONF_APP,
                force=force,
            )
        except Exception as exc:
            logger.error("Failed to generate examples", extra={"error": str(exc)})
            raise _fail(str(exc), ExitCode.GENERAL_ERROR) from exc

    if not created:
        click.echo("\nNo files generated (all already exist). Use --force to overwrite.")
        return
    click.echo(f"\nGenerated {len(created)} example file(s):")
    click.echo("\n".join(f"  {path}" for path in created))


__all__ = ["cli_config", "cli_config_deploy", "cli_config_generate_examples"]
