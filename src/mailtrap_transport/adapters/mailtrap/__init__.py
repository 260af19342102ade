"""Mailtrap adapter - Email Sending API transport.

Structure:
    * :mod:`.payload` - Pure message-to-JSON payload builder
    * :mod:`.transport` - HTTP transport issuing ``POST /api/send``
    * :mod:`.config` - Mailtrap configuration model and loader
    * :mod:`.registration` - HTTP client factory, transport factory, registry
    * :mod:`.validation` - Address validation for runtime (CLI) input

Contents:
    * :class:`.transport.MailtrapTransport` - The transport
    * :func:`.payload.build_payload` - Request payload builder
    * :func:`.registration.create_transport` - Config-driven construction
"""

from __future__ import annotations

from .config import MailtrapConfig, load_mailtrap_config_from_dict
from .payload import (
    CATEGORY_HEADER,
    EXCLUDED_HEADERS,
    RequestPayload,
    build_payload,
    extract_category,
    filter_custom_headers,
    format_address,
    format_attachment,
)
from .registration import (
    DEFAULT_CONNECT_TIMEOUT,
    TransportRegistry,
    build_default_registry,
    build_http_client_options,
    create_http_client,
    create_transport,
)
from .transport import DEFAULT_API_ENDPOINT, TRANSPORT_NAME, MailtrapTransport, extract_message_id

__all__ = [
    "CATEGORY_HEADER",
    "DEFAULT_API_ENDPOINT",
    "DEFAULT_CONNECT_TIMEOUT",
    "EXCLUDED_HEADERS",
    "MailtrapConfig",
    "MailtrapTransport",
    "RequestPayload",
    "TRANSPORT_NAME",
    "TransportRegistry",
    "build_default_registry",
    "build_http_client_options",
    "build_payload",
    "create_http_client",
    "create_transport",
    "extract_category",
    "extract_message_id",
    "filter_custom_headers",
    "format_address",
    "format_attachment",
    "load_mailtrap_config_from_dict",
]
