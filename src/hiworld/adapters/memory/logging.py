"""In-memory logging adapter for testing.

Leaves stdlib ``logging`` untouched so pytest's ``caplog`` sees every record.
"""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """No-op -- satisfies the InitLogging protocol without side effects."""


__all__ = ["init_logging_in_memory"]
