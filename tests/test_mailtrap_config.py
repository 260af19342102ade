"""MailtrapConfig model: coercion, immutability and redaction."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from mailtrap_transport.adapters.mailtrap.config import (
    MailtrapConfig,
    load_mailtrap_config_from_dict,
    validate_token,
)
from mailtrap_transport.domain.errors import ConfigurationError


@pytest.mark.os_agnostic
def test_loader_reads_the_mailtrap_section() -> None:
    config = load_mailtrap_config_from_dict(
        {"mailtrap": {"token": "abc", "endpoint": "bulk.api.mailtrap.io", "http": {"timeout": 10}}}
    )

    assert config.token == "abc"
    assert config.endpoint == "bulk.api.mailtrap.io"
    assert config.http == {"timeout": 10}


@pytest.mark.os_agnostic
def test_loader_ignores_unrelated_sections() -> None:
    config = load_mailtrap_config_from_dict({"mailtrap": {"token": "abc"}, "lib_log_rich": {"environment": "dev"}})

    assert config.endpoint is None
    assert config.http == {}


@pytest.mark.os_agnostic
def test_model_is_frozen() -> None:
    config = MailtrapConfig(token="abc")

    with pytest.raises(ValidationError):
        config.token = "other"  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_model_rejects_empty_token() -> None:
    with pytest.raises(ValidationError):
        MailtrapConfig(token="")


@pytest.mark.os_agnostic
def test_repr_hides_the_token() -> None:
    text = repr(MailtrapConfig(token="super-secret"))

    assert "super-secret" not in text
    assert "[REDACTED]" in text


@pytest.mark.os_agnostic
def test_validate_token_returns_token_unchanged() -> None:
    assert validate_token({"token": " padded "}) == " padded "


@pytest.mark.os_agnostic
def test_missing_token_message_names_the_environment_variable() -> None:
    with pytest.raises(ConfigurationError, match="MAILTRAP_TRANSPORT___MAILTRAP__TOKEN"):
        validate_token({})
