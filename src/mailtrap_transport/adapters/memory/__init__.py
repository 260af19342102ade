"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that operate entirely
in memory -- no filesystem, no network, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration and logging adapters
    * :mod:`.http` - Recording HTTP client (RecordingHttpClient)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    init_logging_in_memory,
)
from .http import RecordedRequest, RecordingHttpClient

# Static conformance assertions
if TYPE_CHECKING:
    from mailtrap_transport.application.ports import (
        DisplayConfig,
        GetConfig,
        HttpClient,
        InitLogging,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_http_client: HttpClient = RecordingHttpClient()

__all__ = [
    "RecordedRequest",
    "RecordingHttpClient",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
