"""Public package surface exposing greeting, metadata, and configuration.

Routes imports through the architectural layers:
- Domain exports: the pure greeting builder and its error types
- Application exports: the greeting use case
- Composition exports: wired adapter services (configuration)
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.greeting import GreetingOutcome, resolve_greeting

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    DEFAULT_NAME,
    build_fallback_greeting,
    build_greeting,
    compose_message,
)
from .domain.errors import GreetingError, InvalidGenderError

__all__ = [
    "DEFAULT_NAME",
    "GreetingError",
    "GreetingOutcome",
    "InvalidGenderError",
    "build_fallback_greeting",
    "build_greeting",
    "compose_message",
    "get_config",
    "print_info",
    "resolve_greeting",
]
