"""Static package metadata surfaced to CLI commands and documentation.

Values here mirror ``pyproject.toml`` so the CLI can report its identity
without querying installed distribution metadata at runtime.

Contents:
    * Module-level constants describing the distribution.
    * :func:`version_banner` - the ``--version`` line.
    * :func:`print_info` - the metadata block shown by ``hiworld info``.
"""

from __future__ import annotations

#: Distribution name declared in ``pyproject.toml``.
name = "hiworld"
#: Human-readable summary shown in CLI help output.
title = "Command-line greeting utility with layered configuration and rich logging"
#: Current release version, kept in sync with ``pyproject.toml``.
version = "1.2.0"
#: Author attribution surfaced in CLI output.
author = "hiworld developers"
#: Console-script name published by the package.
shell_command = "hiworld"

#: Vendor, app and slug identifiers used by lib_layered_config path discovery.
LAYEREDCONF_VENDOR: str = "hiworld"
LAYEREDCONF_APP: str = "hiworld"
LAYEREDCONF_SLUG: str = "hiworld"


def version_banner(revision: str) -> str:
    """Return the line printed by ``--version``.

    Example:
        >>> version_banner("abc1234")
        'hiworld version 1.2.0 (rev:abc1234)'
    """
    return f"{shell_command} version {version} (rev:{revision})"


def print_info(revision: str | None = None) -> None:
    """Print the summarised metadata block used by the CLI ``info`` command."""
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    if revision is not None:
        fields.append(("revision", revision))
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
