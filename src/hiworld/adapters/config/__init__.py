"""Configuration adapter - loading, display, overrides, and greeting settings.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.greeting` - Validated ``[greeting]`` section
"""

from __future__ import annotations

from .display import display_config
from .greeting import GreetingSettings, load_greeting_settings
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides

__all__ = [
    "GreetingSettings",
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_greeting_settings",
]
