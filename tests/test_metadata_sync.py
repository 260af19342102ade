"""Verify that __init__conf__ constants stay in sync with pyproject.toml.

A drifting slug or name silently breaks configuration path resolution.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import rtoml

from mailtrap_transport import __init__conf__


def _load_pyproject() -> dict[str, Any]:
    return rtoml.load(Path(__file__).parent.parent / "pyproject.toml")


@pytest.mark.os_agnostic
def test_layeredconf_slug_matches_project_name() -> None:
    """The slug is the hyphenated project name (``~/.config/<slug>/``)."""
    project_name = _load_pyproject()["project"]["name"]

    assert project_name.replace("_", "-") == __init__conf__.LAYEREDCONF_SLUG


@pytest.mark.os_agnostic
@pytest.mark.parametrize("value", [__init__conf__.LAYEREDCONF_VENDOR, __init__conf__.LAYEREDCONF_APP])
def test_layeredconf_path_segments_are_not_blank(value: str) -> None:
    assert value.strip()


@pytest.mark.os_agnostic
def test_version_matches_pyproject_toml() -> None:
    assert __init__conf__.version == _load_pyproject()["project"]["version"]


@pytest.mark.os_agnostic
def test_name_matches_pyproject_toml() -> None:
    project_name = _load_pyproject()["project"]["name"]

    assert __init__conf__.name.replace("-", "_") == project_name.replace("-", "_")
