"""``python -m mailtrap_transport`` runs the console script."""

from __future__ import annotations

from .entry import main

if __name__ == "__main__":
    raise SystemExit(main())
