"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that touch neither
the filesystem, git, nor the logging runtime.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.logging` - No-op logging initializer
    * :mod:`.revision` - Fixed build revision
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
)
from .logging import init_logging_in_memory
from .revision import MEMORY_REVISION, resolve_build_revision_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from hiworld.application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        ResolveBuildRevision,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_resolve_build_revision: ResolveBuildRevision = resolve_build_revision_in_memory

__all__ = [
    "MEMORY_REVISION",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "resolve_build_revision_in_memory",
]
