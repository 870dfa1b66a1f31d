"""Application layer - use cases and port definitions.

Contains use cases that orchestrate domain logic and port protocols that
define the interfaces for adapter implementations.

Contents:
    * :mod:`.greeting` - Greeting use case with invalid-gender recovery
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .greeting import GreetingOutcome, resolve_greeting
from .ports import (
    DisplayConfig,
    GetConfig,
    InitLogging,
    ResolveBuildRevision,
)

__all__ = [
    "DisplayConfig",
    "GetConfig",
    "GreetingOutcome",
    "InitLogging",
    "ResolveBuildRevision",
    "resolve_greeting",
]
