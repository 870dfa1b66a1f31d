"""CLI command implementations.

Contents:
    * Greeting emission from :mod:`.greet`
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .greet import emit_greeting
from .info import cli_info

__all__ = [
    "cli_config",
    "cli_info",
    "emit_greeting",
]
