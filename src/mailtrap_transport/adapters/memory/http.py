"""In-memory HTTP client for testing.

Provides an HTTP client that satisfies the HttpClient port without any
network I/O, plus a factory matching the HttpClientFactory port.

Contents:
    * :class:`RecordingHttpClient` - Captures requests and replays canned responses.
    * :class:`RecordedRequest` - One captured request.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx
import orjson


@dataclass(frozen=True, slots=True)
class RecordedRequest:
    """A request captured by :class:`RecordingHttpClient`."""

    method: str
    url: str
    headers: dict[str, str]
    json: Any


def _empty_requests() -> list[RecordedRequest]:
    return []


def _empty_options() -> list[dict[str, Any]]:
    return []


@dataclass
class RecordingHttpClient:
    """Captures HTTP calls for test assertions.

    Each test should create its own instance. Responses are real
    ``httpx.Response`` objects bound to the captured request, so
    ``raise_for_status`` behaves exactly as in production.

    Attributes:
        requests: Captured requests, in call order.
        status_code: Status of the canned response.
        response_body: Raw response body (bytes, or a value serialized with orjson).
        raise_exception: When set, ``request`` raises it after recording the call.
        factory_options: Options passed to :meth:`factory`, in call order.
        closed: Whether :meth:`close` was called.

    Example:
        >>> client = RecordingHttpClient(response_body={"message_ids": ["abc"]})
        >>> response = client.request("POST", "https://example.test/api/send", headers={}, json={"a": 1})
        >>> response.status_code, client.requests[0].json
        (200, {'a': 1})
    """

    requests: list[RecordedRequest] = field(default_factory=_empty_requests)
    status_code: int = 200
    response_body: Any = b'{"success": true, "message_ids": ["0c7fd939-02cf-11ed-88c2-0a58a9feac02"]}'
    raise_exception: Exception | None = None
    factory_options: list[dict[str, Any]] = field(default_factory=_empty_options)
    closed: bool = False

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def clear(self) -> None:
        """Reset captured data for the next test."""
        self.requests.clear()
        self.factory_options.clear()
        self.raise_exception = None
        self.closed = False

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        json: Any | None = None,
    ) -> httpx.Response:
        """Record the call and return the canned response.

        Raises:
            Exception: If raise_exception is set, raises that exception.
        """
        self.requests.append(RecordedRequest(method=method, url=url, headers=dict(headers or {}), json=json))
        if self.raise_exception is not None:
            raise self.raise_exception
        content = self.response_body if isinstance(self.response_body, bytes) else orjson.dumps(self.response_body)
        return httpx.Response(self.status_code, content=content, request=httpx.Request(method, url))

    def close(self) -> None:
        self.closed = True

    def factory(self, options: Mapping[str, Any]) -> RecordingHttpClient:
        """HttpClientFactory returning this client and recording the options."""
        self.factory_options.append(dict(options))
        return self


__all__ = ["RecordedRequest", "RecordingHttpClient"]
