"""Layered configuration: loading (lib_layered_config) and token-safe display."""

from __future__ import annotations

from .display import REDACTED, display_config, redact_secrets
from .loader import get_config, get_default_config_path, validate_profile

__all__ = [
    "REDACTED",
    "display_config",
    "get_config",
    "get_default_config_path",
    "redact_secrets",
    "validate_profile",
]
