"""Package metadata and PEP 561 marker tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import pytest
import rtoml

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"


def _load_pyproject() -> dict[str, Any]:
    return rtoml.load(PYPROJECT_PATH)


def _wheel_table() -> dict[str, Any]:
    tool_table = cast(dict[str, Any], _load_pyproject().get("tool", {}))
    hatch_table = cast(dict[str, Any], tool_table.get("hatch", {}))
    targets_table = cast(dict[str, Any], cast(dict[str, Any], hatch_table.get("build", {})).get("targets", {}))
    return cast(dict[str, Any], targets_table.get("wheel", {}))


def _get_package_dir() -> Path:
    """Locate the package directory from the wheel configuration."""
    for package_entry in cast(list[Any], _wheel_table().get("packages", [])):
        if isinstance(package_entry, str) and (PROJECT_ROOT / package_entry).is_dir():
            return PROJECT_ROOT / package_entry
    raise AssertionError("Unable to locate package directory")


@pytest.mark.os_agnostic
def test_when_print_info_runs_it_outputs_metadata(capsys: pytest.CaptureFixture[str]) -> None:
    from mailtrap_transport import print_info

    print_info()

    captured = capsys.readouterr().out
    assert "mailtrap_transport" in captured
    assert "mailtrap-transport" in captured


@pytest.mark.os_agnostic
def test_metadata_constants_are_set() -> None:
    from mailtrap_transport import __init__conf__

    assert __init__conf__.name == "mailtrap_transport"
    assert __init__conf__.version
    assert __init__conf__.shell_command == "mailtrap-transport"


@pytest.mark.os_agnostic
def test_py_typed_marker_exists() -> None:
    py_typed = _get_package_dir() / "py.typed"
    assert py_typed.is_file(), f"PEP 561 marker not found at {py_typed}"


@pytest.mark.os_agnostic
def test_wheel_includes_marker_and_default_config() -> None:
    includes = cast(list[str], _wheel_table().get("include", []))

    assert any("py.typed" in entry for entry in includes)
    assert any("defaultconfig.toml" in entry for entry in includes)


@pytest.mark.os_agnostic
def test_console_script_points_at_entry_main() -> None:
    scripts = cast(dict[str, str], _load_pyproject()["project"]["scripts"])

    assert scripts["mailtrap-transport"] == "mailtrap_transport.entry:main"
