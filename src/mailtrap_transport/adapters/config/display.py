"""Display configuration - delegates to lib_layered_config.

Thin wrapper around lib_layered_config's Rich-styled display_config that
redacts the Mailtrap API token and flushes pending log output first so log
lines and configuration output do not interleave.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from mailtrap_transport.adapters.mailtrap.config import CONFIG_SECTION
from mailtrap_transport.domain.enums import OutputFormat

REDACTED = "[REDACTED]"


def redact_secrets(config: Config) -> Config:
    """Return a Config with a non-empty Mailtrap token replaced by ``[REDACTED]``.

    Example:
        >>> cfg = Config({"mailtrap": {"token": "secret"}}, {})
        >>> redact_secrets(cfg)["mailtrap"]["token"]
        '[REDACTED]'
        >>> empty = Config({"mailtrap": {"token": ""}}, {})
        >>> redact_secrets(empty) is empty
        True
    """
    section: Any = config.get(CONFIG_SECTION, default={})
    if not isinstance(section, Mapping) or not section.get("token"):
        return config
    return config.with_overrides({CONFIG_SECTION: {"token": REDACTED}})


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Display configuration using lib_layered_config's Rich display.

    Args:
        config: Already-loaded layered configuration object to display.
        output_format: OutputFormat.HUMAN for TOML-like display or
            OutputFormat.JSON for JSON.
        section: Optional section name to display only that section.
        console: Optional Rich Console for output, mainly for tests.
        profile: Optional profile name to include in provenance comments.

    Raises:
        ValueError: If a section was requested that doesn't exist.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    lib_format = LibOutputFormat(output_format.value)
    _lib_display(redact_secrets(config), output_format=lib_format, section=section, profile=profile, console=console)


__all__ = ["REDACTED", "display_config", "redact_secrets"]
