"""Immutable mail message model handed to transports.

Represents what the host application composes: addresses, subject, bodies,
headers and attachments, plus the resolved delivery envelope and the
outgoing message record that collects send diagnostics.

Contents:
    * :class:`Address` - email plus optional display name.
    * :class:`Header` - one (name, value) header line.
    * :class:`Attachment` - binary part with content type and disposition.
    * :class:`RawMessage` - pre-rendered message body (not API-translatable).
    * :class:`Email` - structured message the Mailtrap transport can send.
    * :class:`Envelope` - resolved sender and flattened recipient list.
    * :class:`SentMessage` - outgoing message record with debug metadata.
"""

from __future__ import annotations

import dataclasses
import mimetypes
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from email.utils import parseaddr
from pathlib import Path
from typing import Literal, Union

from .errors import InvalidAddressError

Disposition = Literal["attachment", "inline"]

_DISPOSITIONS: frozenset[str] = frozenset({"attachment", "inline"})
_DEFAULT_CONTENT_TYPE = "application/octet-stream"

AddressLike = Union["Address", str]
HeaderLike = Union["Header", tuple[str, str]]


@dataclass(frozen=True, slots=True)
class Address:
    """An email address with an optional display name.

    Example:
        >>> Address("jane@example.com", "Jane Doe").to_string()
        '"Jane Doe" <jane@example.com>'
        >>> Address("jane@example.com").to_string()
        'jane@example.com'
        >>> Address("  ")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidAddressError: An email address must not be empty
    """

    email: str
    name: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.email, str) or not self.email.strip():
            raise InvalidAddressError("An email address must not be empty")
        object.__setattr__(self, "email", self.email.strip())
        if self.name is None:
            object.__setattr__(self, "name", "")

    @classmethod
    def create(cls, value: AddressLike) -> Address:
        """Build an Address from an instance or a ``"Name <email>"`` string.

        Example:
            >>> Address.create("Jane Doe <jane@example.com>")
            Address(email='jane@example.com', name='Jane Doe')
            >>> Address.create("jane@example.com")
            Address(email='jane@example.com', name='')
        """
        if isinstance(value, Address):
            return value
        name, email = parseaddr(value)
        if not email:
            raise InvalidAddressError(f"Invalid address: {value!r}")
        return cls(email=email, name=name)

    def to_string(self) -> str:
        """Render the address as a header value (quoted name when present)."""
        if not self.name:
            return self.email
        escaped = self.name.replace('"', '\\"')
        return f'"{escaped}" <{self.email}>'


@dataclass(frozen=True, slots=True)
class Header:
    """A single message header line. Names are not unique within a message."""

    name: str
    value: str

    @classmethod
    def create(cls, value: HeaderLike) -> Header:
        if isinstance(value, Header):
            return value
        name, body = value
        return cls(name=name, value=body)


@dataclass(frozen=True, slots=True)
class Attachment:
    """Binary attachment owned by the message.

    Example:
        >>> part = Attachment(b"%PDF", "report.pdf", "application/pdf")
        >>> part.media_type, part.media_subtype
        ('application', 'pdf')
        >>> Attachment(b"x", "x.bin", disposition="sideways")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: disposition must be 'attachment' or 'inline'
    """

    body: bytes
    filename: str | None = None
    content_type: str = _DEFAULT_CONTENT_TYPE
    disposition: Disposition = "attachment"

    def __post_init__(self) -> None:
        if self.disposition not in _DISPOSITIONS:
            raise ValueError(f"disposition must be 'attachment' or 'inline', got {self.disposition!r}")

    @property
    def media_type(self) -> str:
        return self.content_type.split("/", 1)[0]

    @property
    def media_subtype(self) -> str:
        _, _, subtype = self.content_type.partition("/")
        return subtype

    @classmethod
    def from_path(cls, path: Path | str, *, inline: bool = False, filename: str | None = None) -> Attachment:
        """Read an attachment from disk, guessing its content type from the name.

        Raises:
            FileNotFoundError: When the path does not exist.
        """
        file_path = Path(path)
        guessed, _ = mimetypes.guess_type(file_path.name)
        return cls(
            body=file_path.read_bytes(),
            filename=filename if filename is not None else file_path.name,
            content_type=guessed or _DEFAULT_CONTENT_TYPE,
            disposition="inline" if inline else "attachment",
        )


@dataclass(frozen=True, slots=True)
class RawMessage:
    """A pre-rendered MIME message. API transports cannot translate it."""

    body: bytes


def _addresses(values: AddressLike | Iterable[AddressLike] | None) -> tuple[Address, ...]:
    if values is None:
        return ()
    if isinstance(values, (Address, str)):
        return (Address.create(values),)
    return tuple(Address.create(value) for value in values)


def _headers(values: Mapping[str, str] | Iterable[HeaderLike] | None) -> tuple[Header, ...]:
    if values is None:
        return ()
    if isinstance(values, Mapping):
        return tuple(Header(name=name, value=value) for name, value in values.items())
    return tuple(Header.create(value) for value in values)


@dataclass(frozen=True, slots=True)
class Email:
    """Structured message: addresses, subject, bodies, headers, attachments.

    Immutable once built. Use :meth:`create` for string/sequence coercion and
    :meth:`with_header` / :meth:`with_attachment` to derive variants.

    Example:
        >>> email = Email.create(
        ...     from_="Sender <sender@example.com>",
        ...     to="recipient@example.com",
        ...     subject="Hi",
        ...     text="Hello",
        ... )
        >>> email.to[0].email
        'recipient@example.com'
        >>> email.with_header("X-Mailtrap-Category", "welcome").headers[0].name
        'X-Mailtrap-Category'
    """

    from_: tuple[Address, ...] = ()
    to: tuple[Address, ...] = ()
    cc: tuple[Address, ...] = ()
    bcc: tuple[Address, ...] = ()
    reply_to: tuple[Address, ...] = ()
    subject: str = ""
    text: str | None = None
    html: str | None = None
    headers: tuple[Header, ...] = ()
    attachments: tuple[Attachment, ...] = ()

    @classmethod
    def create(
        cls,
        *,
        from_: AddressLike | Iterable[AddressLike] | None = None,
        to: AddressLike | Iterable[AddressLike] | None = None,
        cc: AddressLike | Iterable[AddressLike] | None = None,
        bcc: AddressLike | Iterable[AddressLike] | None = None,
        reply_to: AddressLike | Iterable[AddressLike] | None = None,
        subject: str = "",
        text: str | None = None,
        html: str | None = None,
        headers: Mapping[str, str] | Iterable[HeaderLike] | None = None,
        attachments: Iterable[Attachment] | None = None,
    ) -> Email:
        return cls(
            from_=_addresses(from_),
            to=_addresses(to),
            cc=_addresses(cc),
            bcc=_addresses(bcc),
            reply_to=_addresses(reply_to),
            subject=subject,
            text=text,
            html=html,
            headers=_headers(headers),
            attachments=tuple(attachments) if attachments is not None else (),
        )

    def with_header(self, name: str, value: str) -> Email:
        """Return a copy with one more header appended."""
        return dataclasses.replace(self, headers=(*self.headers, Header(name=name, value=value)))

    def with_attachment(self, attachment: Attachment) -> Email:
        """Return a copy with one more attachment appended."""
        return dataclasses.replace(self, attachments=(*self.attachments, attachment))


@dataclass(frozen=True, slots=True)
class Envelope:
    """Resolved delivery sender and the flattened To+CC+BCC recipient list."""

    sender: Address
    recipients: tuple[Address, ...]

    def __post_init__(self) -> None:
        if not self.recipients:
            raise ValueError("An envelope must have at least one recipient")

    @classmethod
    def from_message(cls, email: Email) -> Envelope:
        """Derive the envelope from the message's From/To/Cc/Bcc addresses.

        Example:
            >>> email = Email.create(from_="a@example.com", to="b@example.com", bcc="c@example.com")
            >>> [a.email for a in Envelope.from_message(email).recipients]
            ['b@example.com', 'c@example.com']
        """
        if not email.from_:
            raise ValueError("Cannot derive an envelope: the message has no From address")
        return cls(sender=email.from_[0], recipients=(*email.to, *email.cc, *email.bcc))


def _empty_debug() -> list[str]:
    return []


@dataclass(slots=True)
class SentMessage:
    """Outgoing message record returned by a transport.

    Collects provider diagnostics during the send. ``message_id`` holds the
    provider-assigned identifier when the API returned one.

    Example:
        >>> record = SentMessage(Email.create(from_="a@example.com", to="b@example.com"),
        ...                      Envelope(Address("a@example.com"), (Address("b@example.com"),)))
        >>> record.append_debug("Message ID: 42")
        >>> record.debug
        'Message ID: 42'
    """

    original_message: Email
    envelope: Envelope
    message_id: str | None = None
    _debug: list[str] = field(default_factory=_empty_debug, repr=False)

    @property
    def debug(self) -> str:
        return "\n".join(self._debug)

    def append_debug(self, text: str) -> None:
        self._debug.append(text)


__all__ = [
    "Address",
    "AddressLike",
    "Attachment",
    "Disposition",
    "Email",
    "Envelope",
    "Header",
    "HeaderLike",
    "RawMessage",
    "SentMessage",
]
