"""Application layer - port definitions wiring domain to adapters.

Contents:
    * :mod:`.ports` - Protocol definitions for transports, HTTP clients,
      configuration and logging.
"""

from __future__ import annotations

from .ports import (
    CreateTransport,
    DisplayConfig,
    GetConfig,
    HttpClient,
    HttpClientFactory,
    HttpResponse,
    InitLogging,
    MailTransport,
)

__all__ = [
    "CreateTransport",
    "DisplayConfig",
    "GetConfig",
    "HttpClient",
    "HttpClientFactory",
    "HttpResponse",
    "InitLogging",
    "MailTransport",
]
