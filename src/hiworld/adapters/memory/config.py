"""In-memory configuration adapters for testing.

Satisfy the same Protocols as the production adapters without reading
any configuration file.
"""

from __future__ import annotations

from lib_layered_config import Config

from ...domain.behaviors import DEFAULT_NAME
from ...domain.enums import OutputFormat, OutputSink


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return a Config holding only the greeting defaults."""
    return Config({"greeting": {"sink": OutputSink.STDOUT.value, "default_name": DEFAULT_NAME}}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display -- satisfies the DisplayConfig protocol."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
]
