"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config

# Logging services
from ..adapters.logging.setup import init_logging

# Build metadata
from ..adapters.vcs.revision import resolve_build_revision

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        ResolveBuildRevision,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_resolve_build_revision: ResolveBuildRevision = resolve_build_revision


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging
    resolve_build_revision: ResolveBuildRevision


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
        resolve_build_revision=resolve_build_revision,
    )


def build_testing() -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Returns:
        AppServices whose config holds only greeting defaults, whose logging
        initializer is a no-op and whose build revision is fixed.
    """
    from ..adapters.memory import (
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
        resolve_build_revision_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        resolve_build_revision=resolve_build_revision_in_memory,
    )


__all__ = [
    # Configuration
    "get_config",
    "display_config",
    # Logging
    "init_logging",
    # Build metadata
    "resolve_build_revision",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
