"""Mailtrap transport for transactional email.

Public API routed through the architectural layers:
- Domain exports: message model and errors
- Adapter exports: the transport, its payload builder and registration
- Composition exports: wired configuration access
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Adapter exports
from .adapters.mailtrap import (
    DEFAULT_API_ENDPOINT,
    MailtrapConfig,
    MailtrapTransport,
    RequestPayload,
    TransportRegistry,
    build_default_registry,
    build_payload,
    create_http_client,
    create_transport,
)

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain import (
    Address,
    Attachment,
    ConfigurationError,
    Email,
    Envelope,
    Header,
    InvalidAddressError,
    RawMessage,
    SentMessage,
    UnsupportedMessageTypeError,
)

__all__ = [
    "DEFAULT_API_ENDPOINT",
    "Address",
    "Attachment",
    "ConfigurationError",
    "Email",
    "Envelope",
    "Header",
    "InvalidAddressError",
    "MailtrapConfig",
    "MailtrapTransport",
    "RawMessage",
    "RequestPayload",
    "SentMessage",
    "TransportRegistry",
    "UnsupportedMessageTypeError",
    "build_default_registry",
    "build_payload",
    "create_http_client",
    "create_transport",
    "get_config",
    "print_info",
]
