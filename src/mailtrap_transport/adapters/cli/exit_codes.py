"""POSIX-conventional exit codes for CLI error paths.

Signal codes (130, 141, 143) are informational; ``lib_cli_exit_tools``
handles signal-to-exit-code translation itself.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes raised via ``SystemExit`` by CLI commands.

    Values follow sysexits.h and errno conventions where applicable:

    * 0–1: generic success / failure
    * 2: ENOENT (attachment file missing)
    * 22: EINVAL (bad address, header or option)
    * 69: EX_UNAVAILABLE (Mailtrap API rejected or unreachable)
    * 78: EX_CONFIG (token missing or invalid)
    * 110: ETIMEDOUT

    Example:
        >>> int(ExitCode.DELIVERY_FAILURE)
        69
        >>> ExitCode.CONFIG_ERROR
        <ExitCode.CONFIG_ERROR: 78>
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    INVALID_ARGUMENT = 22
    DELIVERY_FAILURE = 69
    CONFIG_ERROR = 78
    TIMEOUT = 110
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
