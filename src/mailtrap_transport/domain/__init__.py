"""Domain layer - pure message model and errors with no I/O or framework dependencies.

Contents:
    * :mod:`.message` - Immutable message, envelope and sent-message types
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import OutputFormat
from .errors import ConfigurationError, InvalidAddressError, UnsupportedMessageTypeError
from .message import (
    Address,
    Attachment,
    Email,
    Envelope,
    Header,
    RawMessage,
    SentMessage,
)

__all__ = [
    # Message model
    "Address",
    "Attachment",
    "Email",
    "Envelope",
    "Header",
    "RawMessage",
    "SentMessage",
    # Enums
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "InvalidAddressError",
    "UnsupportedMessageTypeError",
]
