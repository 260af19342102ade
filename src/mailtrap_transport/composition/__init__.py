"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path

# Logging services
from ..adapters.logging.setup import init_logging

# Mailtrap services
from ..adapters.mailtrap.registration import create_http_client, create_transport

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.http import RecordingHttpClient
    from ..application.ports import (
        CreateTransport,
        DisplayConfig,
        GetConfig,
        HttpClientFactory,
        InitLogging,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_create_transport: CreateTransport = create_transport
    _assert_http_client_factory: HttpClientFactory = create_http_client
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    create_transport: CreateTransport
    http_client_factory: HttpClientFactory
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        create_transport=create_transport,
        http_client_factory=create_http_client,
        init_logging=init_logging,
    )


def build_testing(*, http_client: RecordingHttpClient | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    The real transport is kept; only its HTTP client is replaced, so tests
    exercise payload building and response parsing end to end.

    Args:
        http_client: Optional RecordingHttpClient capturing API calls. When
            None, a fresh one is created. Pass your own to assert on requests.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        RecordingHttpClient,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    recorder = http_client if http_client is not None else RecordingHttpClient()

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        create_transport=create_transport,
        http_client_factory=recorder.factory,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    # Configuration
    "display_config",
    "get_config",
    "get_default_config_path",
    # Mailtrap
    "create_http_client",
    "create_transport",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
