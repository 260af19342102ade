"""Shared pytest fixtures for transport, CLI and module-entry tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import contextlib
import dataclasses
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from mailtrap_transport.domain.message import Email

if TYPE_CHECKING:
    from mailtrap_transport.adapters.memory.http import RecordingHttpClient
    from mailtrap_transport.composition import AppServices

_COVERAGE_BASENAME = ".coverage.mailtrap_transport"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete leftover SQLite database and journal files from crashed runs."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Redirect the coverage database to a **local** temp directory.

    Runs before ``pytest-cov`` creates its ``Coverage()`` object, so the
    ``COVERAGE_FILE`` value is picked up however pytest is invoked.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load .env file when it exists for integration test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test."""
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from mailtrap_transport.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test.

    Only clears before, not after, so a monkeypatched ``get_config`` without
    ``cache_clear`` does not break teardown.
    """
    from mailtrap_transport.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts, without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def recording_client() -> RecordingHttpClient:
    """Provide a fresh RecordingHttpClient answering 200 with one message id."""
    from mailtrap_transport.adapters.memory.http import RecordingHttpClient as RecordingHttpClientImpl

    return RecordingHttpClientImpl()


@pytest.fixture
def simple_email() -> Email:
    """A plain-text message with one sender and one recipient."""
    return Email.create(from_="Sender <sender@example.com>", to="r@x.com", subject="S", text="hi")


@dataclass
class MailtrapCliContext:
    """Container for send-command test setup.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        client: RecordingHttpClient capturing the API calls.
    """

    factory: Callable[[], Any]
    client: RecordingHttpClient


@pytest.fixture
def mailtrap_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], MailtrapCliContext]:
    """Create CLI test context from a ``[mailtrap]`` section.

    The returned factory wires the in-memory HTTP client into the real
    transport and serves a Config built from the given section.

    Example:
        def test_send(cli_runner, mailtrap_cli_context) -> None:
            ctx = mailtrap_cli_context({"token": "secret"})
            result = cli_runner.invoke(cli, ["send", ...], obj=ctx.factory)
            assert ctx.client.call_count == 1
    """
    from mailtrap_transport.adapters.memory.http import RecordingHttpClient as RecordingHttpClientImpl
    from mailtrap_transport.composition import build_production, build_testing

    def _create(mailtrap_data: dict[str, Any]) -> MailtrapCliContext:
        client = RecordingHttpClientImpl()
        config = Config({"mailtrap": mailtrap_data}, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = dataclasses.replace(
            build_testing(http_client=client),
            get_config=_fake_get_config,
            init_logging=build_production().init_logging,
        )
        return MailtrapCliContext(factory=lambda: test_services, client=client)

    return _create


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory that provides production services with an injected Config.

    Only replaces the I/O boundary (``get_config``), not the Config object itself.
    """
    from mailtrap_transport.composition import AppServices, build_production

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = dataclasses.replace(build_production(), get_config=_fake_get_config)
        return lambda: test_services

    return _inject


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records the profile it was asked for."""
    from mailtrap_transport.composition import AppServices, build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        test_services = dataclasses.replace(build_production(), get_config=_capturing_get_config)
        return lambda: test_services

    return _inject
