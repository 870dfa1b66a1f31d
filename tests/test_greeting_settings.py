"""Greeting settings stories: the validated ``[greeting]`` section."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config
from pydantic import ValidationError

from hiworld.adapters.config.greeting import GreetingSettings, load_greeting_settings
from hiworld.domain.enums import OutputSink


@pytest.mark.os_agnostic
def test_missing_section_yields_defaults(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """No [greeting] table means stdout and the default name."""
    settings = load_greeting_settings(config_factory({}))

    assert settings == GreetingSettings(sink=OutputSink.STDOUT, default_name="Youre")


@pytest.mark.os_agnostic
def test_values_are_read_from_the_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """Configured values replace the defaults."""
    settings = load_greeting_settings(config_factory({"greeting": {"sink": "log", "default_name": "Team"}}))

    assert settings.sink is OutputSink.LOG
    assert settings.default_name == "Team"


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("section", "fragment"),
    [
        ({"sink": "printer"}, "sink"),
        ({"snk": "log"}, "snk"),
        ({"default_name": 42}, "default_name"),
    ],
)
def test_invalid_sections_raise_value_error(
    config_factory: Callable[[dict[str, Any]], Config],
    section: dict[str, Any],
    fragment: str,
) -> None:
    """Validation problems name the offending key."""
    with pytest.raises(ValueError, match="Invalid greeting configuration") as excinfo:
        load_greeting_settings(config_factory({"greeting": section}))

    assert fragment in str(excinfo.value)


@pytest.mark.os_agnostic
def test_settings_are_frozen() -> None:
    """Loaded settings cannot be mutated afterwards."""
    settings = GreetingSettings()

    with pytest.raises(ValidationError):
        settings.sink = OutputSink.LOG  # type: ignore[misc]
