"""Layered configuration loader: defaults, profiles and caching."""

from __future__ import annotations

from pathlib import Path

import pytest

from mailtrap_transport.adapters.config import loader
from mailtrap_transport.adapters.config.loader import get_config, get_default_config_path, validate_profile


@pytest.mark.os_agnostic
def test_default_config_file_ships_with_package() -> None:
    path = get_default_config_path()

    assert path.is_file()
    assert path.name == "defaultconfig.toml"


@pytest.mark.os_agnostic
def test_defaults_provide_the_api_endpoint(clear_config_cache: None, tmp_path: Path) -> None:
    config = get_config(start_dir=str(tmp_path))

    assert config.get("mailtrap.endpoint") == "send.api.mailtrap.io"
    assert "mailtrap" in config.as_dict()


@pytest.mark.os_agnostic
def test_repeated_calls_hit_the_cache(clear_config_cache: None) -> None:
    assert get_config() is get_config()


@pytest.mark.os_agnostic
def test_cache_clear_forces_a_fresh_read(clear_config_cache: None) -> None:
    first = get_config()

    loader.get_config.cache_clear()

    assert get_config() is not first


@pytest.mark.os_agnostic
@pytest.mark.parametrize("profile", ["production", "staging-eu", "dev_1"])
def test_valid_profiles_are_accepted(profile: str) -> None:
    validate_profile(profile)


@pytest.mark.os_agnostic
@pytest.mark.parametrize("profile", ["", "../etc/passwd", "a/b"])
def test_invalid_profiles_are_rejected(profile: str) -> None:
    with pytest.raises(ValueError):
        validate_profile(profile)


@pytest.mark.os_agnostic
def test_get_config_validates_profile_before_reading(clear_config_cache: None) -> None:
    with pytest.raises(ValueError):
        get_config(profile="../escape")
