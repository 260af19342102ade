"""Centralized logging initialization for all entry points.

Single source of truth for the lib_log_rich runtime configuration. Library
modules only ever call ``logging.getLogger(__name__)``; this module attaches
stdlib logging to lib_log_rich once, at CLI start-up.

Contents:
    * :class:`LoggingConfigModel` – validates the ``[lib_log_rich]`` section.
    * :func:`init_logging` – idempotent logging initialization.
"""

from __future__ import annotations

import logging
from typing import Final, cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from mailtrap_transport import __init__conf__


#: Third-party loggers that log every request at INFO; kept at WARNING so the
#: send output stays readable.
_CHATTY_HTTP_LOGGERS: Final[tuple[str, ...]] = ("httpx", "httpcore")


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``[lib_log_rich]`` config section.

    Extra fields pass through to ``lib_log_rich.runtime.RuntimeConfig``.

    Example:
        >>> LoggingConfigModel(service="mailer").service
        'mailer'
        >>> LoggingConfigModel().environment
        'prod'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    The service name defaults to the package name when not configured.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})
    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def init_logging(config: Config) -> None:
    """Initialize lib_log_rich runtime with the provided configuration.

    Safe to call repeatedly: the first call loads ``.env`` (so ``LOG_*``
    variables apply), initializes the runtime, bridges stdlib logging and
    quiets the per-request httpx loggers. Later calls return immediately.

    Args:
        config: Loaded layered configuration with a ``[lib_log_rich]`` section.

    Example:
        >>> from lib_layered_config import Config
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()
    for name in _CHATTY_HTTP_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
