"""Command-line interface for ``mailtrap-transport``.

Commands: ``info``, ``config`` and ``send``. :func:`main` is the process
entry used by ``entry.py`` and ``__main__.py``; tests drive :data:`cli`
directly with Click's ``CliRunner``.
"""

from __future__ import annotations

from .commands import cli_config, cli_info, cli_send
from .constants import (
    CLICK_CONTEXT_SETTINGS,
    DEVELOPMENT_MODE_ENV,
    TOKEN_ENV_VAR,
    TRACEBACK_SUMMARY_LIMIT,
    TRACEBACK_VERBOSE_LIMIT,
)
from .context import (
    CLIContext,
    TracebackState,
    apply_traceback_preferences,
    get_cli_context,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "DEVELOPMENT_MODE_ENV",
    "TOKEN_ENV_VAR",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "CLIContext",
    "ExitCode",
    "TracebackState",
    "apply_traceback_preferences",
    "cli",
    "cli_config",
    "cli_info",
    "cli_send",
    "get_cli_context",
    "main",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
