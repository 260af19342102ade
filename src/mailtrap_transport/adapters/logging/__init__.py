"""lib_log_rich start-up for the CLI; library code only uses stdlib loggers."""

from __future__ import annotations

from .setup import LoggingConfigModel, init_logging

__all__ = ["LoggingConfigModel", "init_logging"]
