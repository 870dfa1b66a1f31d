"""Click context helpers for CLI state management."""

from __future__ import annotations

import contextlib
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

from hiworld.adapters.config.greeting import GreetingSettings

if TYPE_CHECKING:
    from hiworld.composition import AppServices

TracebackState = tuple[bool, bool]
"""Captured traceback configuration: (traceback_enabled, force_color)."""


@dataclass(slots=True)
class CLIContext:
    """Typed CLI context for Click subcommand access."""

    traceback: bool
    config: Config
    services: AppServices
    settings: GreetingSettings
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def resolve_services(ctx: click.Context) -> AppServices:
    """Build AppServices from the factory Click carries in ``ctx.obj``.

    Raises:
        RuntimeError: If ``ctx.obj`` is not a callable services factory.
    """
    factory: Callable[[], Any] | None = ctx.obj if callable(ctx.obj) else None
    if factory is None:
        raise RuntimeError("Services factory not provided. This is a bug.")
    return factory()


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    settings: GreetingSettings,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Store CLI state in the Click context for subcommand access.

    Args:
        ctx: Click context associated with the current invocation.
        traceback: Whether verbose tracebacks were requested.
        config: Loaded layered configuration object for all subcommands.
        services: All application services from composition layer.
        settings: Validated ``[greeting]`` section.
        profile: Optional configuration profile name.
        set_overrides: Raw ``--set`` strings, reapplied when a subcommand
            reloads config with a different profile.
    """
    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        settings=settings,
        profile=profile,
        set_overrides=set_overrides,
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Retrieve typed CLI state from Click context.

    Raises:
        RuntimeError: If CLI context was not properly initialized.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def command_log_scope(job_id: str, **extra: object) -> contextlib.AbstractContextManager[object]:
    """Bind ``job_id`` and ``extra`` to log records emitted inside the block.

    Falls back to a null context when the lib_log_rich runtime is not
    initialised, as with the in-memory test services.
    """
    if not lib_log_rich.runtime.is_initialised():
        return contextlib.nullcontext()
    return lib_log_rich.runtime.bind(job_id=job_id, extra=extra)


def apply_traceback_preferences(enabled: bool) -> None:
    """Synchronise shared traceback flags with the requested preference.

    Example:
        >>> apply_traceback_preferences(True)
        >>> bool(lib_cli_exit_tools.config.traceback)
        True
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    """Capture the current traceback configuration for later restoration."""
    return (
        bool(getattr(lib_cli_exit_tools.config, "traceback", False)),
        bool(getattr(lib_cli_exit_tools.config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Reapply a configuration captured by :func:`snapshot_traceback_state`."""
    lib_cli_exit_tools.config.traceback = state[0]
    lib_cli_exit_tools.config.traceback_force_color = state[1]


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "command_log_scope",
    "get_cli_context",
    "resolve_services",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
