"""Mailtrap Email Sending API transport.

Sends an :class:`~mailtrap_transport.domain.message.Email` with exactly one
``POST https://{endpoint}/api/send`` through an injected HTTP client and
records the provider message id on the returned
:class:`~mailtrap_transport.domain.message.SentMessage`.

Failure handling is left to the HTTP client: connection errors, timeouts and
non-2xx statuses (via ``raise_for_status``) propagate unchanged. There is no
retry, no backoff, no error translation.
"""

from __future__ import annotations

import logging
from typing import Any, Final, cast

import httpx
import orjson

from mailtrap_transport.application.ports import HttpClient, HttpResponse
from mailtrap_transport.domain.errors import UnsupportedMessageTypeError
from mailtrap_transport.domain.message import Email, Envelope, RawMessage, SentMessage

from .payload import RequestPayload, build_payload

logger = logging.getLogger(__name__)

#: Default Mailtrap API host.
DEFAULT_API_ENDPOINT: Final[str] = "send.api.mailtrap.io"

#: Name the transport identifies itself with.
TRANSPORT_NAME: Final[str] = "mailtrap"


def extract_message_id(response: HttpResponse) -> str | None:
    """Return the first id from a ``{"message_ids": [...]}`` response body.

    Anything else (invalid JSON, a non-object body, a missing or empty list,
    a null first element) yields None. Never raises.

    Example:
        >>> extract_message_id(httpx.Response(200, content=b'{"message_ids": [123]}'))
        '123'
        >>> extract_message_id(httpx.Response(200, content=b'{"message_ids": []}')) is None
        True
        >>> extract_message_id(httpx.Response(200, content=b'not json')) is None
        True
    """
    try:
        data: Any = orjson.loads(response.content)
    except orjson.JSONDecodeError:
        return None

    if not isinstance(data, dict):
        return None
    message_ids = cast(dict[str, Any], data).get("message_ids")
    if not isinstance(message_ids, list) or not message_ids:
        return None
    first = cast(list[Any], message_ids)[0]
    if first is None:
        return None
    return str(first)


class MailtrapTransport:
    """Transport translating messages into Mailtrap API calls.

    Owns the HTTP client, API token and endpoint. Each field can be replaced
    after construction; replacements are not validated. Instances are not
    thread-safe: use one instance per thread when sending concurrently.

    Example:
        >>> transport = MailtrapTransport(httpx.Client(), "token")
        >>> str(transport)
        'mailtrap'
        >>> transport.api_url
        'https://send.api.mailtrap.io/api/send'
    """

    def __init__(self, http_client: HttpClient, api_token: str, api_endpoint: str | None = None) -> None:
        self._http_client = http_client
        self._api_token = api_token
        self._api_endpoint = api_endpoint if api_endpoint is not None else DEFAULT_API_ENDPOINT

    def __str__(self) -> str:
        return TRANSPORT_NAME

    def __repr__(self) -> str:
        return f"MailtrapTransport(api_endpoint={self._api_endpoint!r})"

    def identify(self) -> str:
        """Return the fixed transport name used for selection and logging."""
        return TRANSPORT_NAME

    @property
    def http_client(self) -> HttpClient:
        return self._http_client

    @property
    def api_token(self) -> str:
        return self._api_token

    @property
    def api_endpoint(self) -> str:
        return self._api_endpoint

    @property
    def api_url(self) -> str:
        return f"https://{self._api_endpoint}/api/send"

    def set_http_client(self, http_client: HttpClient) -> MailtrapTransport:
        self._http_client = http_client
        return self

    def set_api_token(self, api_token: str) -> MailtrapTransport:
        self._api_token = api_token
        return self

    def set_api_endpoint(self, api_endpoint: str) -> MailtrapTransport:
        self._api_endpoint = api_endpoint
        return self

    def close(self) -> None:
        """Close the HTTP client; a closed transport cannot send again."""
        self._http_client.close()

    def __enter__(self) -> MailtrapTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def send(self, message: Email | RawMessage, envelope: Envelope | None = None) -> SentMessage:
        """Send one message through the Mailtrap API.

        Args:
            message: Must be an :class:`Email`; raw MIME messages cannot be
                translated into the API payload.
            envelope: Resolved sender/recipients. Derived from the message's
                From/To/Cc/Bcc when None.

        Returns:
            Outgoing message record; ``message_id`` is set when the API
            response carried one.

        Raises:
            UnsupportedMessageTypeError: Before any network I/O when
                ``message`` is not an :class:`Email`.
            httpx.HTTPError: Any transport-level failure, unchanged.
        """
        if not isinstance(message, Email):
            raise UnsupportedMessageTypeError(Email.__name__, type(message).__name__)

        resolved_envelope = envelope if envelope is not None else Envelope.from_message(message)
        sent = SentMessage(original_message=message, envelope=resolved_envelope)
        payload = build_payload(message, resolved_envelope, api_token=self._api_token)

        logger.info(
            "Sending email via Mailtrap API",
            extra={
                "endpoint": self._api_endpoint,
                "recipient_count": len(resolved_envelope.recipients),
                "attachment_count": len(message.attachments),
                "category": payload.json.get("category"),
            },
        )
        response = self._post(payload)
        self._record_message_id(sent, response)
        return sent

    def _post(self, payload: RequestPayload) -> HttpResponse:
        try:
            response = self._http_client.request("POST", self.api_url, **payload.as_request_kwargs())
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error(
                "Mailtrap API request failed",
                extra={"endpoint": self._api_endpoint, "error_type": type(exc).__name__, "error": str(exc)},
            )
            raise
        return response

    def _record_message_id(self, sent: SentMessage, response: HttpResponse) -> None:
        message_id = extract_message_id(response)
        if message_id is None:
            logger.debug("Mailtrap API response carried no message id", extra={"endpoint": self._api_endpoint})
            return
        sent.message_id = message_id
        sent.append_debug(f"Message ID: {message_id}")
        logger.info("Email accepted by Mailtrap", extra={"message_id": message_id})


__all__ = [
    "DEFAULT_API_ENDPOINT",
    "TRANSPORT_NAME",
    "MailtrapTransport",
    "extract_message_id",
]
