"""Mailtrap configuration model and loader.

Provides the MailtrapConfig Pydantic model for validated, immutable transport
settings and the loader that extracts it from the ``[mailtrap]`` section of
the layered configuration.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from mailtrap_transport.domain.errors import ConfigurationError

#: Configuration section holding the Mailtrap settings.
CONFIG_SECTION = "mailtrap"

_MISSING_TOKEN_MESSAGE = (
    "Mailtrap API token is missing. Please configure it under the [mailtrap] section "
    'as "token" or set MAILTRAP_TRANSPORT___MAILTRAP__TOKEN in your environment or .env file.'
)
_NON_STRING_TOKEN_MESSAGE = "Mailtrap API token must be a string. Please check your configuration."


class MailtrapConfig(BaseModel):
    """Validated, immutable Mailtrap transport configuration.

    Example:
        >>> config = MailtrapConfig(token="abc123", http={"timeout": 30})
        >>> config.endpoint is None
        True
        >>> config.http
        {'timeout': 30}
    """

    model_config = ConfigDict(frozen=True)

    token: StrictStr = Field(min_length=1)
    endpoint: str | None = None
    http: dict[str, Any] = Field(default_factory=dict)

    @field_validator("endpoint", mode="before")
    @classmethod
    def _coerce_endpoint(cls, v: Any) -> str | None:
        """Treat empty endpoints as "use the default"; stringify anything else.

        Examples:
            >>> MailtrapConfig._coerce_endpoint("")
            >>> MailtrapConfig._coerce_endpoint("bulk.api.mailtrap.io")
            'bulk.api.mailtrap.io'
        """
        if v is None:
            return None
        text = str(v).strip()
        return text or None

    @field_validator("http", mode="before")
    @classmethod
    def _coerce_http_options(cls, v: Any) -> dict[str, Any]:
        """Accept mappings only; any other value means "no options".

        Examples:
            >>> MailtrapConfig._coerce_http_options("fast please")
            {}
            >>> MailtrapConfig._coerce_http_options({"verify": False})
            {'verify': False}
        """
        if isinstance(v, Mapping):
            return dict(cast(Mapping[str, Any], v))
        return {}

    def __repr__(self) -> str:
        """Return string representation with the token redacted.

        Example:
            >>> "abc123" in repr(MailtrapConfig(token="abc123"))
            False
        """
        return f"MailtrapConfig(token='[REDACTED]', endpoint={self.endpoint!r}, http={self.http!r})"


def validate_token(section: Mapping[str, Any]) -> str:
    """Return the configured token or fail with a descriptive error.

    Only presence and type are checked; the token format is not.

    Raises:
        ConfigurationError: When the token is missing/empty or not a string.

    Example:
        >>> validate_token({"token": "abc"})
        'abc'
        >>> validate_token({})  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ConfigurationError: Mailtrap API token is missing...
    """
    token = section.get("token")
    if not token or (isinstance(token, str) and not token.strip()):
        raise ConfigurationError(_MISSING_TOKEN_MESSAGE)
    if not isinstance(token, str):
        raise ConfigurationError(_NON_STRING_TOKEN_MESSAGE)
    return token


def load_mailtrap_config_from_dict(config_dict: Mapping[str, Any]) -> MailtrapConfig:
    """Load MailtrapConfig from a configuration dictionary.

    Bridges lib_layered_config's dictionary output with the typed model.
    A missing or non-mapping ``[mailtrap]`` section behaves like an empty one
    and therefore fails on the missing token.

    Args:
        config_dict: Configuration dictionary typically from
            ``Config.as_dict()``, expected to have a ``mailtrap`` section.

    Returns:
        Validated Mailtrap settings.

    Raises:
        ConfigurationError: When the token is missing, empty or not a string.

    Example:
        >>> config = load_mailtrap_config_from_dict({"mailtrap": {"token": "abc", "http": "bogus"}})
        >>> config.http
        {}
    """
    section_raw: Any = config_dict.get(CONFIG_SECTION, {})
    section: Mapping[str, Any] = cast(Mapping[str, Any], section_raw) if isinstance(section_raw, Mapping) else {}

    token = validate_token(section)
    return MailtrapConfig.model_validate(
        {
            "token": token,
            "endpoint": section.get("endpoint"),
            "http": section.get("http", {}),
        }
    )


__all__ = [
    "CONFIG_SECTION",
    "MailtrapConfig",
    "load_mailtrap_config_from_dict",
    "validate_token",
]
