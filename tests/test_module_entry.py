"""Module entry stories ensuring `python -m` mirrors the CLI."""

from __future__ import annotations

import runpy
import subprocess
import sys
from collections.abc import Callable

import lib_cli_exit_tools
import pytest

from mailtrap_transport import __init__conf__, entry
from mailtrap_transport.adapters import cli as cli_mod

_BAD_SEND = ["send", "--from", "s@example.com", "--to", "not-an-email", "--text", "hi"]


@pytest.mark.os_agnostic
def test_module_entry_executes_cli_and_shows_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """python -m invocation with no args shows help and exits 0."""
    monkeypatch.setattr(sys, "argv", [__init__conf__.shell_command], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("mailtrap_transport.__main__", run_name="__main__")

    captured = capsys.readouterr()
    assert exc.value.code == 0
    assert "Usage:" in captured.out


@pytest.mark.os_agnostic
def test_module_entry_reports_invalid_recipient(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    """A malformed address ends the process with the invalid-argument code."""
    monkeypatch.setattr(sys, "argv", [__init__conf__.shell_command, *_BAD_SEND], raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("mailtrap_transport.__main__", run_name="__main__")

    assert exc.value.code == cli_mod.ExitCode.INVALID_ARGUMENT
    assert "not-an-email" in strip_ansi(capsys.readouterr().err)


@pytest.mark.os_agnostic
def test_cli_facade_exports_registered_commands() -> None:
    exported = {name for name in dir(cli_mod) if name.startswith("cli_")}

    assert {"cli_config", "cli_info", "cli_send"}.issubset(exported)


@pytest.mark.os_agnostic
def test_module_entry_subprocess_help() -> None:
    """`python -m mailtrap_transport --help` works in a fresh interpreter."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "mailtrap_transport", "--help"],
        capture_output=True,
        timeout=30,
        check=False,
        # rich-click emits Unicode that cp1252 cannot decode
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert "Usage:" in result.stdout
    assert "send" in result.stdout


@pytest.mark.os_agnostic
def test_module_entry_subprocess_version() -> None:
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "mailtrap_transport", "--version"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert __init__conf__.version in result.stdout


@pytest.mark.os_agnostic
def test_entry_main_invokes_cli_with_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """entry.main() wires production services for the console script."""
    monkeypatch.setattr(sys, "argv", [__init__conf__.shell_command, "--help"])

    exit_code = entry.main()

    assert exit_code == 0
    assert "Usage:" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_entry_main_returns_nonzero_on_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "argv", [__init__conf__.shell_command, *_BAD_SEND])
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False)

    assert entry.main() == cli_mod.ExitCode.INVALID_ARGUMENT
