"""Domain-specific exceptions for typed error handling at boundaries.

Transport failures are deliberately absent: the HTTP client's own exceptions
(``httpx.HTTPError`` and subclasses) reach the caller untouched.
"""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised at registration time when the Mailtrap API token is absent or not a
    string, and when an unknown transport name is requested. Prevents the
    transport from being constructed at all.

    Example:
        >>> from mailtrap_transport.domain.errors import ConfigurationError
        >>> err = ConfigurationError("Mailtrap API token is missing")
        >>> str(err)
        'Mailtrap API token is missing'
    """


class UnsupportedMessageTypeError(TypeError):
    """The transport was asked to send a message type it cannot translate.

    Raised before any network I/O. Carries the expected and actual type names
    so callers can report them without parsing the message.

    Example:
        >>> err = UnsupportedMessageTypeError("Email", "RawMessage")
        >>> str(err)
        'The message must be an instance of Email, got RawMessage'
        >>> err.expected
        'Email'
        >>> isinstance(err, TypeError)
        True
    """

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"The message must be an instance of {expected}, got {actual}")


class InvalidAddressError(ValueError):
    """Email address validation failure.

    Raised when an address is empty or, at the CLI boundary, fails RFC 5321/5322
    validation. Inherits from ValueError so generic ``except ValueError``
    handlers catch it.

    Example:
        >>> err = InvalidAddressError("Invalid address: not-an-email")
        >>> str(err)
        'Invalid address: not-an-email'
        >>> isinstance(err, ValueError)
        True
    """


__all__ = [
    "ConfigurationError",
    "InvalidAddressError",
    "UnsupportedMessageTypeError",
]
