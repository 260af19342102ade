"""``config``: print the merged configuration with the API token masked."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from mailtrap_transport.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([member.value for member in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="human (TOML-like, with provenance) or json",
)
@click.option("--section", default=None, help="Print one section only, e.g. 'mailtrap' or 'lib_log_rich'")
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None) -> None:
    """Show the configuration the ``send`` command would use.

    Layers, lowest first: defaults, app, host, user, .env, environment.
    The ``[mailtrap]`` token is printed as ``[REDACTED]``.
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(job_id="cli-config", extra={"command": "config", "profile": cli_ctx.profile}):
        logger.info("Displaying configuration", extra={"format": fmt.value, "section": section})
        click.echo()
        try:
            cli_ctx.services.display_config(cli_ctx.config, output_format=fmt, section=section, profile=cli_ctx.profile)
        except ValueError as exc:
            # Unknown section.
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
