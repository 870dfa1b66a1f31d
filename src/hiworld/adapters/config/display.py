"""Display configuration via lib_layered_config's Rich renderer."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from hiworld.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Render ``config`` (or one section of it) to stdout.

    Pending log output is flushed first so log lines do not interleave
    with the rendered configuration.

    Args:
        config: Already-loaded layered configuration object.
        output_format: HUMAN for TOML-like output, JSON for machine output.
        section: Optional section name, e.g. ``"greeting"``.
        console: Optional Rich Console, mainly for tests.
        profile: Optional profile name shown in provenance comments.

    Raises:
        ValueError: If ``section`` does not exist in ``config``.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    lib_format = LibOutputFormat(output_format.value)
    _lib_display(config, output_format=lib_format, section=section, profile=profile, console=console)


__all__ = ["display_config"]
