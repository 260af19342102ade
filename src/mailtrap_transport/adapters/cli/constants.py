"""Values shared by the root group, the entry wrapper and the commands."""

from __future__ import annotations

from typing import Final

#: Click settings applied to every command: ``-h`` works like ``--help``.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

#: Traceback characters printed for an unexpected failure without ``--traceback``.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Traceback characters printed with ``--traceback``.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

#: When set in the environment, unexpected send failures propagate instead
#: of being folded into exit code 1.
DEVELOPMENT_MODE_ENV: Final[str] = "DEVELOPMENT_MODE"

#: Environment variable carrying the API token through lib_layered_config.
TOKEN_ENV_VAR: Final[str] = "MAILTRAP_TRANSPORT___MAILTRAP__TOKEN"

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "DEVELOPMENT_MODE_ENV",
    "TOKEN_ENV_VAR",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
