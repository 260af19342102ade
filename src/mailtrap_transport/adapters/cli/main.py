"""Process-level wrapper around the root group.

:func:`main` is what the console script and ``python -m`` call. It passes the
services factory to Click, converts every outcome into an exit code and
cleans up global state (traceback flags, the lib_log_rich runtime).
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from mailtrap_transport import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import apply_traceback_preferences, restore_traceback_state, snapshot_traceback_state

if TYPE_CHECKING:
    from mailtrap_transport.composition import AppServices


def _report_unexpected(exc: BaseException) -> int:
    """Print *exc* through lib_cli_exit_tools and return its exit code."""
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(verbose)
    limit = TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(argv: Sequence[str] | None, services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    # The root group expects the factory in ctx.obj, which run_cli cannot pass.
    try:
        cli.main(
            args=list(sys.argv[1:] if argv is None else argv),
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # SystemExit from commands lands here too
        return _report_unexpected(exc)
    return 0


def _shutdown_logging() -> None:
    if threading.current_thread() is not threading.main_thread():
        return
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run ``mailtrap-transport`` and return its exit code.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` when None.
        restore_traceback: Put the traceback flags back as they were before
            the run.
        services_factory: Returns the AppServices to use, normally
            ``composition.build_production``.

    Raises:
        ValueError: When no services factory is given.
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    saved = snapshot_traceback_state()
    try:
        return _invoke(argv, services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(saved)
        _shutdown_logging()


__all__ = ["main"]
