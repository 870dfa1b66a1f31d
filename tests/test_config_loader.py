"""Configuration loader stories: bundled defaults, profiles, caching."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result

from hiworld.adapters import cli as cli_mod
from hiworld.adapters.cli.exit_codes import ExitCode
from hiworld.adapters.config.loader import get_config, get_default_config_path, validate_profile


@pytest.mark.os_agnostic
def test_default_config_path_points_at_the_bundled_file() -> None:
    """The bundled defaults sit next to the loader."""
    path = get_default_config_path()

    assert path.name == "defaultconfig.toml"
    assert path.is_file()


@pytest.mark.os_agnostic
def test_get_config_includes_the_greeting_defaults(clear_config_cache: None) -> None:
    """Without user files the greeting section comes from the defaults."""
    greeting = get_config().get("greeting", default={})

    assert greeting.get("sink") == "stdout"


@pytest.mark.os_agnostic
def test_get_config_is_cached_per_profile(clear_config_cache: None) -> None:
    """Repeated loads return the same object until the cache is cleared."""
    first = get_config()

    assert get_config() is first
    get_config.cache_clear()
    assert get_config() is not first


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "profile",
    ["../etc", "..", "foo/bar", "", "-invalid", "_invalid", "CON", "NUL", "LPT1"],
)
def test_unsafe_profile_names_are_rejected(profile: str, clear_config_cache: None) -> None:
    """Profiles that cannot name a plain subdirectory never reach the filesystem."""
    with pytest.raises(ValueError):
        get_config(profile=profile)


@pytest.mark.os_agnostic
@pytest.mark.parametrize("profile", ["staging", "staging-v2", "test_1"])
def test_plain_profile_names_are_accepted(profile: str, clear_config_cache: None) -> None:
    """A missing profile directory is not an error; defaults still load."""
    assert get_config(profile=profile) is not None


@pytest.mark.os_agnostic
def test_validate_profile_honours_a_custom_max_length() -> None:
    """Length limits can be tightened per call."""
    validate_profile("abcdefghij", max_length=10)

    with pytest.raises(ValueError):
        validate_profile("abcdefghijk", max_length=10)


@pytest.mark.os_agnostic
def test_cli_rejects_unsafe_root_profile_as_usage_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    clear_config_cache: None,
) -> None:
    """--profile with a traversal sequence fails before any greeting."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["--profile", "../etc"], obj=production_factory)

    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "new world" not in result.stdout


@pytest.mark.os_agnostic
def test_missing_greeting_profile_still_yields_the_greeting_defaults(clear_config_cache: None) -> None:
    """A profile with no files on disk changes nothing about the greeting."""
    greeting = get_config(profile="greeting-demo").get("greeting", default={})

    assert greeting.get("default_name") == "Youre"
    assert greeting.get("sink") == "stdout"
