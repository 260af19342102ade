"""Per-invocation state shared between the root group and its commands.

The root group loads configuration and services once; commands read them
back through :func:`get_cli_context`. The traceback helpers keep
``lib_cli_exit_tools`` in step with ``--traceback`` and let :func:`main`
put the previous flags back afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from mailtrap_transport.adapters.mailtrap.config import CONFIG_SECTION

if TYPE_CHECKING:
    from mailtrap_transport.application.ports import MailTransport
    from mailtrap_transport.composition import AppServices


class TracebackState(NamedTuple):
    """``lib_cli_exit_tools`` traceback flags at one point in time."""

    enabled: bool
    force_color: bool


@dataclass(slots=True)
class CLIContext:
    """Loaded configuration and wired services for one CLI run."""

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None

    def transport_config(self, endpoint: str | None = None) -> dict[str, Any]:
        """Return the configuration dict, with ``[mailtrap].endpoint`` replaced when given.

        Example:
            >>> from unittest.mock import MagicMock
            >>> ctx = CLIContext(False, Config({"mailtrap": {"token": "t"}}, {}), MagicMock())
            >>> ctx.transport_config("bulk.api.mailtrap.io")["mailtrap"]["endpoint"]
            'bulk.api.mailtrap.io'
        """
        config = self.config
        if endpoint:
            config = config.with_overrides({CONFIG_SECTION: {"endpoint": endpoint}})
        return config.as_dict()

    def create_transport(self, endpoint: str | None = None) -> MailTransport:
        """Build the configured transport through the wired services."""
        return self.services.create_transport(
            self.transport_config(endpoint),
            http_client_factory=self.services.http_client_factory,
        )


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
) -> None:
    """Replace the services factory in ``ctx.obj`` with the loaded :class:`CLIContext`."""
    ctx.obj = CLIContext(traceback=traceback, config=config, services=services, profile=profile)


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root group.

    Raises:
        RuntimeError: When a command runs without the root group.
    """
    state = ctx.obj
    if isinstance(state, CLIContext):
        return state
    raise RuntimeError("CLI context missing: commands must run below the root group.")


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full (colored) tracebacks on or off for ``lib_cli_exit_tools``.

    Example:
        >>> apply_traceback_preferences(True)
        >>> lib_cli_exit_tools.config.traceback
        True
    """
    flag = bool(enabled)
    lib_cli_exit_tools.config.traceback = flag
    lib_cli_exit_tools.config.traceback_force_color = flag


def snapshot_traceback_state() -> TracebackState:
    settings = lib_cli_exit_tools.config
    return TracebackState(
        enabled=bool(getattr(settings, "traceback", False)),
        force_color=bool(getattr(settings, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    lib_cli_exit_tools.config.traceback = state.enabled
    lib_cli_exit_tools.config.traceback_force_color = state.force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
