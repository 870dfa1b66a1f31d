"""Shared pytest fixtures for greeting, CLI and module-entry tests.

Centralizes test infrastructure following clean architecture principles:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import lib_log_rich.runtime
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from hiworld.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for integration test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


def pytest_runtest_teardown(item: pytest.Item, nextitem: pytest.Item | None) -> None:
    """Shut down lib_log_rich after each test.

    CliRunner invocations with production services initialise the runtime
    but never pass through ``main()``, which is where it is normally shut
    down. Without this, the stdlib bridge of one test leaks into the next.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for exact greeting assertions: log output goes to
    stderr and is only mixed into ``result.output``.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests.

    Wires real adapters: layered config from disk, lib_log_rich, git lookup.

    Example:
        def test_info(cli_runner: CliRunner, production_factory: Callable[[], AppServices]) -> None:
            result = cli_runner.invoke(cli, ["info"], obj=production_factory)
            assert result.exit_code == 0
    """
    from hiworld.composition import build_production

    return build_production


@pytest.fixture
def testing_factory() -> Callable[[], AppServices]:
    """Provide the in-memory services factory for tests.

    Config holds only the greeting defaults, logging is left to pytest and
    the build revision is fixed to ``MEMORY_REVISION``.
    """
    from hiworld.composition import build_testing

    return build_testing


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before the test.

    Only clears before, not after, because a test may have monkeypatched
    the loader and lost its ``cache_clear`` attribute.
    """
    from hiworld.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def clear_revision_cache() -> Iterator[None]:
    """Clear the cached build revision before and after the test."""
    from hiworld.adapters.vcs.revision import resolve_build_revision

    resolve_build_revision.cache_clear()
    yield
    resolve_build_revision.cache_clear()


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Return a helper that builds a Config from a plain dict.

    Example:
        def test_greeting_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"greeting": {"sink": "log"}})
            assert config["greeting"]["sink"] == "log"
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory that wires ``config`` into otherwise in-memory services.

    Display uses the production adapter so ``config`` output is real.

    Example:
        def test_config_display(
            cli_runner: CliRunner,
            config_factory: Callable[[dict[str, Any]], Config],
            inject_config: Callable[[Config], Callable[[], AppServices]],
        ) -> None:
            factory = inject_config(config_factory({"greeting": {"sink": "log"}}))
            result = cli_runner.invoke(cli, ["config"], obj=factory)
            assert "sink" in result.output
    """
    from hiworld.composition import AppServices, build_production, build_testing

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        memory = build_testing()
        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=build_production().display_config,
            init_logging=memory.init_logging,
            resolve_build_revision=memory.resolve_build_revision,
        )
        return lambda: test_services

    return _inject


@pytest.fixture
def inject_get_config() -> Callable[[Callable[..., Config]], Callable[[], AppServices]]:
    """Return a factory that swaps in a custom ``get_config`` implementation.

    Useful for capturing profile arguments or simulating loader failures.
    """
    from hiworld.composition import AppServices, build_testing

    def _inject(get_config_fn: Callable[..., Config]) -> Callable[[], AppServices]:
        memory = build_testing()
        test_services = AppServices(
            get_config=get_config_fn,
            display_config=memory.display_config,
            init_logging=memory.init_logging,
            resolve_build_revision=memory.resolve_build_revision,
        )
        return lambda: test_services

    return _inject
