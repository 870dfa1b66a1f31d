"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Greeting construction
    * :mod:`.enums` - Domain enumerations (Gender, OutputSink, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    DEFAULT_NAME,
    GREETING_PREFIX,
    GREETING_SUFFIX,
    build_fallback_greeting,
    build_greeting,
    compose_message,
    parse_gender,
)
from .enums import Gender, OutputFormat, OutputSink
from .errors import GreetingError, InvalidGenderError

__all__ = [
    # Behaviors
    "DEFAULT_NAME",
    "GREETING_PREFIX",
    "GREETING_SUFFIX",
    "build_fallback_greeting",
    "build_greeting",
    "compose_message",
    "parse_gender",
    # Enums
    "Gender",
    "OutputFormat",
    "OutputSink",
    # Errors
    "GreetingError",
    "InvalidGenderError",
]
