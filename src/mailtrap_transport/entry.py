"""Console-script target for ``mailtrap-transport``.

Lives beside the composition root rather than under ``adapters`` so the CLI
adapter never imports the wiring itself.
"""

from __future__ import annotations

from .adapters.cli.main import main as run_cli
from .composition import build_production


def main() -> int:
    """Run the CLI on ``sys.argv`` with production services and return the exit code."""
    return run_cli(services_factory=build_production)


__all__ = ["main"]
