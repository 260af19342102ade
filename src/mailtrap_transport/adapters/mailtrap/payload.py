"""Mailtrap API payload construction.

Pure functions translating an :class:`~mailtrap_transport.domain.message.Email`
and its :class:`~mailtrap_transport.domain.message.Envelope` into the request
body of ``POST /api/send``. Nothing here performs I/O or mutates its inputs,
so building the same message twice yields equal payloads.

Contents:
    * :func:`format_address` - ``{"email", "name"?}`` fragment.
    * :func:`format_attachment` - base64 attachment fragment.
    * :func:`extract_category` - split the category header off a header tuple.
    * :func:`filter_custom_headers` - forwardable headers as a name->value map.
    * :func:`build_payload` - the full :class:`RequestPayload`.
"""

from __future__ import annotations

import base64
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Final

from mailtrap_transport.domain.message import Address, Attachment, Email, Envelope, Header

#: Header whose value becomes the top-level ``category`` field.
CATEGORY_HEADER: Final[str] = "X-Mailtrap-Category"

#: Auth header carrying the API token.
API_TOKEN_HEADER: Final[str] = "Api-Token"

#: Headers never forwarded in the ``headers`` map.
EXCLUDED_HEADERS: Final[tuple[str, ...]] = (
    CATEGORY_HEADER,
    "Reply-To",
    "Subject",
    "From",
    "To",
    "Cc",
    "Bcc",
    "Date",
    "Message-ID",
    "MIME-Version",
    "Content-Type",
)

_EXCLUDED_LOWER: Final[frozenset[str]] = frozenset(name.lower() for name in EXCLUDED_HEADERS)


@dataclass(frozen=True, slots=True)
class RequestPayload:
    """Auth headers and JSON body for one ``/api/send`` request."""

    headers: dict[str, str]
    json: dict[str, Any]

    def as_request_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``httpx.Client.request``.

        Example:
            >>> RequestPayload({"Api-Token": "t"}, {"subject": "S"}).as_request_kwargs()
            {'headers': {'Api-Token': 't'}, 'json': {'subject': 'S'}}
        """
        return {"headers": dict(self.headers), "json": dict(self.json)}


def format_address(address: Address) -> dict[str, str]:
    """Format an address; ``name`` appears only when non-empty.

    Example:
        >>> format_address(Address("a@example.com", "A"))
        {'email': 'a@example.com', 'name': 'A'}
        >>> format_address(Address("a@example.com"))
        {'email': 'a@example.com'}
    """
    result = {"email": address.email}
    if address.name:
        result["name"] = address.name
    return result


def format_attachment(attachment: Attachment) -> dict[str, str | None]:
    """Format an attachment with its body base64-encoded.

    Example:
        >>> format_attachment(Attachment(b"hi", "hi.txt", "text/plain"))
        {'content': 'aGk=', 'type': 'text/plain', 'filename': 'hi.txt', 'disposition': 'attachment'}
    """
    return {
        "content": base64.b64encode(attachment.body).decode("ascii"),
        "type": f"{attachment.media_type}/{attachment.media_subtype}",
        "filename": attachment.filename,
        "disposition": attachment.disposition,
    }


def extract_category(headers: Iterable[Header]) -> tuple[str | None, tuple[Header, ...]]:
    """Split the category header from the remaining headers.

    The first ``X-Mailtrap-Category`` header supplies the category; every
    header of that name is dropped from the returned tuple.

    Example:
        >>> category, rest = extract_category([Header("X-Mailtrap-Category", "welcome"), Header("X-A", "1")])
        >>> category, [h.name for h in rest]
        ('welcome', ['X-A'])
    """
    category: str | None = None
    remaining: list[Header] = []
    for header in headers:
        if header.name.lower() == CATEGORY_HEADER.lower():
            if category is None:
                category = header.value
            continue
        remaining.append(header)
    return category, tuple(remaining)


def is_forwardable_header(name: str) -> bool:
    """Return True when a header may travel in the ``headers`` map.

    Example:
        >>> is_forwardable_header("X-Priority")
        True
        >>> is_forwardable_header("Message-ID")
        False
    """
    return name.lower() not in _EXCLUDED_LOWER


def filter_custom_headers(headers: Iterable[Header]) -> dict[str, str]:
    """Collect forwardable headers; a repeated name keeps its last value."""
    return {header.name: header.value for header in headers if is_forwardable_header(header.name)}


def _base_json(email: Email, envelope: Envelope) -> dict[str, Any]:
    return {
        "from": format_address(envelope.sender),
        "to": [format_address(address) for address in envelope.recipients],
        "subject": email.subject,
    }


def _recipient_fields(email: Email) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    if email.cc:
        fields["cc"] = [format_address(address) for address in email.cc]
    if email.bcc:
        fields["bcc"] = [format_address(address) for address in email.bcc]
    return fields


def _content_fields(email: Email) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    if email.html is not None:
        fields["html"] = email.html
    if email.text is not None:
        fields["text"] = email.text
    return fields


def _attachment_fields(email: Email) -> dict[str, Any]:
    if not email.attachments:
        return {}
    return {"attachments": [format_attachment(attachment) for attachment in email.attachments]}


def _metadata_fields(email: Email) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    category, remaining = extract_category(email.headers)
    if category is not None:
        fields["category"] = category

    custom_headers = filter_custom_headers(remaining)
    # Reply-To is applied last so it always wins.
    if email.reply_to:
        custom_headers["Reply-To"] = email.reply_to[0].to_string()
    if custom_headers:
        fields["headers"] = custom_headers
    return fields


def build_payload(email: Email, envelope: Envelope, *, api_token: str) -> RequestPayload:
    """Build the ``/api/send`` request payload for one message.

    Fields are assembled in a fixed order: base fields (``from``, ``to``,
    ``subject``), ``cc``/``bcc``, ``html``/``text``, ``attachments``, then
    metadata (``category``, ``headers`` including ``Reply-To``). Optional
    fields are omitted, never sent empty.

    Args:
        email: Message to translate.
        envelope: Resolved sender and flattened recipient list; ``to`` is
            populated from it, not from the display-level To header.
        api_token: Mailtrap API token placed in the ``Api-Token`` header.

    Returns:
        Fresh payload; the inputs are left untouched.

    Example:
        >>> email = Email.create(from_="s@example.com", to="r@x.com", subject="S", text="hi")
        >>> payload = build_payload(email, Envelope.from_message(email), api_token="t")
        >>> payload.json
        {'from': {'email': 's@example.com'}, 'to': [{'email': 'r@x.com'}], 'subject': 'S', 'text': 'hi'}
    """
    body = _base_json(email, envelope)
    body.update(_recipient_fields(email))
    body.update(_content_fields(email))
    body.update(_attachment_fields(email))
    body.update(_metadata_fields(email))
    return RequestPayload(headers={API_TOKEN_HEADER: api_token}, json=body)


__all__ = [
    "API_TOKEN_HEADER",
    "CATEGORY_HEADER",
    "EXCLUDED_HEADERS",
    "RequestPayload",
    "build_payload",
    "extract_category",
    "filter_custom_headers",
    "format_address",
    "format_attachment",
    "is_forwardable_header",
]
