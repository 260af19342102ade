"""The ``mailtrap-transport`` command group.

Global options (``--traceback``, ``--profile``) are handled here. The group
turns the services factory in ``ctx.obj`` into a :class:`CLIContext` before
any subcommand runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click

from mailtrap_transport import __init__conf__

from .constants import CLICK_CONTEXT_SETTINGS, TOKEN_ENV_VAR
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from mailtrap_transport.composition import AppServices

_EPILOG = f"The API token is read from the [mailtrap] config section or from {TOKEN_ENV_VAR}."


def _services_from(ctx: click.Context) -> AppServices:
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    return factory()  # type: ignore[no-any-return]  # ctx.obj is Any


@click.group(
    help=__init__conf__.title,
    epilog=_EPILOG,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Print the full Python traceback on failure")
@click.option(
    "--profile",
    default=None,
    help="Configuration profile to load, e.g. 'staging' for a sandbox token",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None) -> None:
    """Load configuration for *profile*, start logging and hand over to the subcommand."""
    services = _services_from(ctx)
    config = services.get_config(profile=profile)
    services.init_logging(config)
    store_cli_context(ctx, traceback=traceback, config=config, services=services, profile=profile)
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    # Imported late: the command modules import this package.
    from .commands import cli_config, cli_info, cli_send

    for command in (cli_info, cli_config, cli_send):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
