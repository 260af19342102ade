"""``info``: package metadata plus the Mailtrap settings in effect."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import lib_log_rich.runtime
import rich_click as click

from mailtrap_transport import __init__conf__
from mailtrap_transport.adapters.mailtrap.config import CONFIG_SECTION
from mailtrap_transport.adapters.mailtrap.transport import DEFAULT_API_ENDPOINT

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context

logger = logging.getLogger(__name__)


def _describe_mailtrap(section: Any) -> list[str]:
    """Summarise ``[mailtrap]`` without revealing the token.

    Example:
        >>> _describe_mailtrap({"token": "abc", "endpoint": ""})
        ['    api_endpoint     = send.api.mailtrap.io', '    token_configured = yes']
    """
    values: Mapping[str, Any] = section if isinstance(section, Mapping) else {}
    endpoint = str(values.get("endpoint") or "").strip() or DEFAULT_API_ENDPOINT
    token = values.get("token")
    has_token = isinstance(token, str) and bool(token.strip())
    return [
        f"    api_endpoint     = {endpoint}",
        f"    token_configured = {'yes' if has_token else 'no'}",
    ]


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_info(ctx: click.Context) -> None:
    """Show installation metadata and whether a token is configured."""
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info", "profile": cli_ctx.profile}):
        logger.info("Displaying package information")
        __init__conf__.print_info()
        click.echo("\n".join(["", "Mailtrap:", *_describe_mailtrap(cli_ctx.config.get(CONFIG_SECTION, default={}))]))


__all__ = ["cli_info"]
