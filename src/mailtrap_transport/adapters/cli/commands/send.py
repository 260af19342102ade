"""Send command: deliver one message through the Mailtrap API.

Contents:
    * :func:`cli_send` - Build an :class:`Email` from options and send it.
    * :func:`parse_header` - Parse a ``NAME:VALUE`` option value.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from contextlib import closing
from pathlib import Path
from typing import NoReturn

import httpx
import lib_log_rich.runtime
import rich_click as click

from mailtrap_transport.adapters.mailtrap.payload import CATEGORY_HEADER
from mailtrap_transport.adapters.mailtrap.validation import validate_address, validate_addresses
from mailtrap_transport.domain.errors import ConfigurationError
from mailtrap_transport.domain.message import Attachment, Email, Header, SentMessage

from ..constants import CLICK_CONTEXT_SETTINGS, DEVELOPMENT_MODE_ENV
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def parse_header(value: str) -> Header:
    """Parse ``NAME:VALUE`` into a header; the value keeps inner colons.

    Raises:
        ValueError: When the colon is missing or the name is empty.

    Example:
        >>> parse_header("X-Trace: a:b")
        Header(name='X-Trace', value='a:b')
    """
    name, sep, header_value = value.partition(":")
    if not sep or not name.strip():
        raise ValueError(f"Header must look like NAME:VALUE, got {value!r}")
    return Header(name.strip(), header_value.strip())


def _build_email(
    *,
    sender: str,
    recipients: tuple[str, ...],
    cc: tuple[str, ...],
    bcc: tuple[str, ...],
    reply_to: tuple[str, ...],
    subject: str,
    text: str | None,
    html: str | None,
    attachments: tuple[str, ...],
    inline: tuple[str, ...],
    headers: tuple[str, ...],
    category: str | None,
) -> Email:
    parsed_headers = [parse_header(h) for h in headers]
    if category:
        parsed_headers.append(Header(CATEGORY_HEADER, category))
    files = [Attachment.from_path(Path(p)) for p in attachments]
    files.extend(Attachment.from_path(Path(p), inline=True) for p in inline)
    return Email(
        from_=(validate_address(sender),),
        to=validate_addresses(recipients),
        cc=validate_addresses(cc),
        bcc=validate_addresses(bcc),
        reply_to=validate_addresses(reply_to),
        subject=subject,
        text=text,
        html=html,
        headers=tuple(parsed_headers),
        attachments=tuple(files),
    )


def _deliver(cli_ctx: CLIContext, build: Callable[[], Email], endpoint: str | None) -> SentMessage:
    # Build first: a bad address or missing file never reaches config validation.
    email = build()
    with closing(cli_ctx.create_transport(endpoint)) as transport:
        return transport.send(email)


def _handle_send_error(
    exc: Exception,
    log_message: str,
    user_message: str,
    *,
    exit_code: ExitCode = ExitCode.GENERAL_ERROR,
    log_traceback: bool = False,
) -> NoReturn:
    """Log the failure, tell the user and exit with ``exit_code``.

    Raises:
        SystemExit: Always.
    """
    logger.error(
        log_message,
        extra={"error": str(exc), "error_type": type(exc).__name__},
        exc_info=log_traceback,
    )
    click.echo(f"\nError: {user_message} - {exc}", err=True)
    raise SystemExit(exit_code)


def _execute_with_error_handling(operation: Callable[[], SentMessage]) -> SentMessage:
    """Run the send and translate failures into exit codes.

    Exceptions are caught most specific first:

    1. ConfigurationError -> CONFIG_ERROR (78)
    2. FileNotFoundError -> FILE_NOT_FOUND (2)
    3. ValueError (InvalidAddressError included) -> INVALID_ARGUMENT (22)
    4. httpx.TimeoutException -> TIMEOUT (110)
    5. httpx.HTTPError -> DELIVERY_FAILURE (69)
    6. Exception -> GENERAL_ERROR (1), re-raised when DEVELOPMENT_MODE is set
    """
    try:
        return operation()
    except ConfigurationError as exc:
        _handle_send_error(exc, "Mailtrap configuration error", "Configuration error", exit_code=ExitCode.CONFIG_ERROR)
    except FileNotFoundError as exc:
        _handle_send_error(
            exc, "Attachment file not found", "Attachment file not found", exit_code=ExitCode.FILE_NOT_FOUND
        )
    except ValueError as exc:
        _handle_send_error(
            exc, "Invalid message parameters", "Invalid message parameters", exit_code=ExitCode.INVALID_ARGUMENT
        )
    except httpx.TimeoutException as exc:
        _handle_send_error(exc, "Mailtrap API timed out", "Request timed out", exit_code=ExitCode.TIMEOUT)
    except httpx.HTTPError as exc:
        _handle_send_error(exc, "Mailtrap delivery failed", "Failed to send email", exit_code=ExitCode.DELIVERY_FAILURE)
    except Exception as exc:
        if os.environ.get(DEVELOPMENT_MODE_ENV):
            raise
        _handle_send_error(
            exc,
            "Unexpected error sending email",
            "Unexpected error",
            exit_code=ExitCode.GENERAL_ERROR,
            log_traceback=True,
        )


@click.command("send", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--from", "sender", required=True, help="Sender address ('Name <email>' or bare email)")
@click.option("--to", "recipients", multiple=True, required=True, help="Recipient address (repeatable)")
@click.option("--cc", multiple=True, default=(), help="Carbon-copy address (repeatable)")
@click.option("--bcc", multiple=True, default=(), help="Blind carbon-copy address (repeatable)")
@click.option("--reply-to", "reply_to", multiple=True, default=(), help="Reply-To address (first one is used)")
@click.option("--subject", default="", help="Subject line")
@click.option("--text", default=None, help="Plain-text body")
@click.option("--html", default=None, help="HTML body")
@click.option(
    "--attachment",
    "attachments",
    multiple=True,
    type=click.Path(path_type=str),
    help="File to attach (repeatable)",
)
@click.option(
    "--inline",
    multiple=True,
    type=click.Path(path_type=str),
    help="File to embed inline (repeatable)",
)
@click.option("--header", "headers", multiple=True, default=(), metavar="NAME:VALUE", help="Custom header (repeatable)")
@click.option("--category", default=None, help="Mailtrap category for the message")
@click.option("--endpoint", default=None, help="Override the API host (e.g., 'bulk.api.mailtrap.io')")
@click.pass_context
def cli_send(
    ctx: click.Context,
    sender: str,
    recipients: tuple[str, ...],
    cc: tuple[str, ...],
    bcc: tuple[str, ...],
    reply_to: tuple[str, ...],
    subject: str,
    text: str | None,
    html: str | None,
    attachments: tuple[str, ...],
    inline: tuple[str, ...],
    headers: tuple[str, ...],
    category: str | None,
    endpoint: str | None,
) -> None:
    """Send one email through the Mailtrap Email Sending API.

    Prints the message id reported by Mailtrap, if any.
    """
    cli_ctx = get_cli_context(ctx)
    extra = {"command": "send", "recipients": list(recipients), "subject": subject}

    with lib_log_rich.runtime.bind(job_id="cli-send", extra=extra):
        logger.info(
            "Sending email",
            extra={
                "has_html": html is not None,
                "attachment_count": len(attachments) + len(inline),
                "category": category,
            },
        )

        def build() -> Email:
            return _build_email(
                sender=sender,
                recipients=recipients,
                cc=cc,
                bcc=bcc,
                reply_to=reply_to,
                subject=subject,
                text=text,
                html=html,
                attachments=attachments,
                inline=inline,
                headers=headers,
                category=category,
            )

        sent = _execute_with_error_handling(lambda: _deliver(cli_ctx, build, endpoint))
        logger.info("Email sent via CLI", extra={"message_id": sent.message_id})
        click.echo(sent.message_id or "Email sent (no message id returned)")


__all__ = ["cli_send", "parse_header"]
