"""Static package metadata surfaced to CLI commands and configuration paths.

Keeps the values in one place so the console script, the ``info`` command and
the layered configuration loader agree on names. ``tests/test_metadata_sync.py``
fails when these constants drift from ``pyproject.toml``.
"""

from __future__ import annotations

#: Distribution name declared in ``pyproject.toml``.
name = "mailtrap_transport"
#: Human-readable summary shown in CLI help output.
title = "Send application mail through the Mailtrap Email Sending API"
#: Current release version.
version = "1.0.0"
#: Repository homepage.
homepage = "https://github.com/mailtrap-transport/mailtrap-transport"
#: Author attribution.
author = "mailtrap-transport contributors"
#: Contact address for the maintainers.
author_email = "maintainers@mailtrap-transport.dev"
#: Console-script name published by the package.
shell_command = "mailtrap-transport"

#: Vendor segment for macOS/Windows configuration directories.
LAYEREDCONF_VENDOR: str = "mailtrap-transport"
#: Application segment for macOS/Windows configuration directories.
LAYEREDCONF_APP: str = "Mailtrap Transport"
#: Slug for Linux configuration directories and the environment prefix.
LAYEREDCONF_SLUG: str = "mailtrap-transport"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for mailtrap_transport:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
