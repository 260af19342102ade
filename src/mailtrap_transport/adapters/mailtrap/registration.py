"""Transport registration: configuration in, configured transport out.

Replaces a framework service-provider hook with plain functions. The host
application reads its configuration, calls :func:`create_transport` (directly
or through a :class:`TransportRegistry`) and receives a ready transport.

Contents:
    * :func:`build_http_client_options` - layer defaults under user options.
    * :func:`create_http_client` - ``httpx.Client`` from an options mapping.
    * :func:`create_transport` - validate config, build client and transport.
    * :class:`TransportRegistry` - named transport factories.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from typing import Any, Final

import httpx

from mailtrap_transport.application.ports import HttpClient, HttpClientFactory
from mailtrap_transport.domain.errors import ConfigurationError

from .config import load_mailtrap_config_from_dict
from .transport import TRANSPORT_NAME, MailtrapTransport

logger = logging.getLogger(__name__)

#: Connect timeout in seconds applied unless the configuration overrides it.
DEFAULT_CONNECT_TIMEOUT: Final[float] = 60.0

#: Option keys folded into a single ``httpx.Timeout``.
_TIMEOUT_KEYS: Final[dict[str, str]] = {
    "connect_timeout": "connect",
    "read_timeout": "read",
    "write_timeout": "write",
    "pool_timeout": "pool",
}

#: Keyword arguments ``httpx.Client`` accepts; ``timeout`` is built separately.
_CLIENT_ARGUMENTS: Final[frozenset[str]] = frozenset(inspect.signature(httpx.Client).parameters) - {"timeout"}

TransportFactory = Callable[..., Any]


def build_http_client_options(options: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Return client options with the default connect timeout filled in.

    A missing or null ``connect_timeout`` gets the default. A ready-made
    ``httpx.Timeout`` passed as ``timeout`` already carries its own connect
    value and gets no default next to it.

    Example:
        >>> build_http_client_options({"timeout": 30})
        {'timeout': 30, 'connect_timeout': 60.0}
        >>> build_http_client_options({"connect_timeout": None})
        {'connect_timeout': 60.0}
        >>> build_http_client_options({"connect_timeout": 10})
        {'connect_timeout': 10}
    """
    merged: dict[str, Any] = dict(options or {})
    if merged.get("connect_timeout") is None and not isinstance(merged.get("timeout"), httpx.Timeout):
        merged["connect_timeout"] = DEFAULT_CONNECT_TIMEOUT
    return merged


def _build_timeout(options: dict[str, Any]) -> httpx.Timeout:
    """Pop timeout keys from *options* and fold them into an ``httpx.Timeout``.

    ``timeout`` is the overall default (None = wait indefinitely) or an
    ``httpx.Timeout``; non-null per-phase keys override it.
    """
    overall = options.pop("timeout", None)
    phases: dict[str, Any] = {}
    for key, phase in _TIMEOUT_KEYS.items():
        value = options.pop(key, None)
        if value is not None:
            phases[phase] = value
    if isinstance(overall, httpx.Timeout):
        base = {"connect": overall.connect, "read": overall.read, "write": overall.write, "pool": overall.pool}
        base.update(phases)
        return httpx.Timeout(None, **base)
    return httpx.Timeout(overall, **phases)


def create_http_client(options: Mapping[str, Any]) -> httpx.Client:
    """Build the ``httpx.Client`` used by the transport.

    Timeout keys (``timeout``, ``connect_timeout``, ``read_timeout``,
    ``write_timeout``, ``pool_timeout``) become one ``httpx.Timeout``; every
    other key is passed to ``httpx.Client`` unchanged (``headers``,
    ``verify``, ``proxy``, ``follow_redirects``, ...).

    Raises:
        ConfigurationError: When an option is not an ``httpx.Client``
            argument (for example ``http_errors``).

    Example:
        >>> client = create_http_client({"headers": {"User-Agent": "app/1.0"}})
        >>> client.timeout.connect
        60.0
        >>> client.headers["User-Agent"]
        'app/1.0'
    """
    client_kwargs = build_http_client_options(options)
    timeout = _build_timeout(client_kwargs)
    unknown = sorted(set(client_kwargs) - _CLIENT_ARGUMENTS)
    if unknown:
        raise ConfigurationError(
            f"Unsupported [mailtrap.http] option(s): {', '.join(unknown)}. "
            "Use timeout / connect_timeout / read_timeout / write_timeout / pool_timeout "
            "or an httpx.Client argument."
        )
    return httpx.Client(timeout=timeout, **client_kwargs)


def create_transport(
    config_dict: Mapping[str, Any],
    *,
    http_client_factory: HttpClientFactory = create_http_client,
) -> MailtrapTransport:
    """Validate the ``[mailtrap]`` configuration and build the transport.

    Validation runs first; the HTTP client factory is never called when it
    fails.

    Args:
        config_dict: Full configuration dictionary (``Config.as_dict()``).
        http_client_factory: Builds the HTTP client from the ``http`` options.

    Returns:
        Configured transport.

    Raises:
        ConfigurationError: When the token is missing, empty or not a string,
            or when the HTTP options hold an unsupported key.
    """
    mailtrap_config = load_mailtrap_config_from_dict(config_dict)
    http_client: HttpClient = http_client_factory(mailtrap_config.http)
    transport = MailtrapTransport(http_client, mailtrap_config.token, mailtrap_config.endpoint)
    logger.debug(
        "Mailtrap transport created",
        extra={"endpoint": transport.api_endpoint, "http_options": sorted(mailtrap_config.http)},
    )
    return transport


class TransportRegistry:
    """Named transport factories, the host's extension point for mailers.

    Example:
        >>> registry = build_default_registry()
        >>> registry.names()
        ['mailtrap']
        >>> registry.create("smtp", {})  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ConfigurationError: Unknown mail transport 'smtp'
    """

    def __init__(self) -> None:
        self._factories: dict[str, TransportFactory] = {}

    def register(self, name: str, factory: TransportFactory) -> None:
        """Register (or replace) the factory for *name*."""
        self._factories[name] = factory

    def names(self) -> list[str]:
        return sorted(self._factories)

    def create(self, name: str, config_dict: Mapping[str, Any], **kwargs: Any) -> Any:
        """Build the transport registered as *name* from the configuration.

        Raises:
            ConfigurationError: When no factory is registered under *name*,
                or when the factory rejects the configuration.
        """
        factory = self._factories.get(name)
        if factory is None:
            known = ", ".join(self.names()) or "none"
            raise ConfigurationError(f"Unknown mail transport {name!r} (registered: {known})")
        return factory(config_dict, **kwargs)


def build_default_registry() -> TransportRegistry:
    """Return a registry with the Mailtrap transport registered."""
    registry = TransportRegistry()
    registry.register(TRANSPORT_NAME, create_transport)
    return registry


__all__ = [
    "DEFAULT_CONNECT_TIMEOUT",
    "TransportRegistry",
    "build_default_registry",
    "build_http_client_options",
    "create_http_client",
    "create_transport",
]
