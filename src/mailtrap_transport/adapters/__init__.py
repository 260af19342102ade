"""Adapters layer - infrastructure implementations of the application ports.

Contents:
    * :mod:`.mailtrap` - Mailtrap Email Sending API transport
    * :mod:`.config` - Layered configuration loading and display
    * :mod:`.logging` - lib_log_rich initialization
    * :mod:`.cli` - rich_click command-line interface
    * :mod:`.memory` - In-memory test doubles
"""

from __future__ import annotations
