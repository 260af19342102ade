"""Application ports: Protocol definitions for adapters and collaborators.

Production adapters and the in-memory doubles in :mod:`..adapters.memory`
satisfy these protocols structurally (PEP 544); no inheritance is required.

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``httpx`` types) are imported under ``TYPE_CHECKING``
    only so that layer contracts remain satisfied at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat
from ..domain.message import Email, Envelope, RawMessage, SentMessage

if TYPE_CHECKING:
    from lib_layered_config import Config


class HttpResponse(Protocol):
    """The slice of ``httpx.Response`` the transport reads."""

    @property
    def content(self) -> bytes: ...

    def raise_for_status(self) -> Any: ...


class HttpClient(Protocol):
    """Synchronous HTTP client issuing one request per call (``httpx.Client``)."""

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = ...,
        json: Any | None = ...,
    ) -> HttpResponse: ...

    def close(self) -> None: ...


class HttpClientFactory(Protocol):
    """Build an HTTP client from a mapping of client options."""

    def __call__(self, options: Mapping[str, Any]) -> HttpClient: ...


class MailTransport(Protocol):
    """Capability interface of a mail transport."""

    def send(self, message: Email | RawMessage, envelope: Envelope | None = ...) -> SentMessage: ...

    def identify(self) -> str: ...

    def close(self) -> None: ...


class CreateTransport(Protocol):
    """Build a configured transport from the layered configuration dictionary."""

    def __call__(
        self,
        config_dict: Mapping[str, Any],
        *,
        http_client_factory: HttpClientFactory = ...,
    ) -> MailTransport: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


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
