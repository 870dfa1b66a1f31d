"""Root CLI command: greeting options, version banner, and global flags.

Invoked without a subcommand, ``hiworld`` greets. Subcommands (``info``,
``config``) share the configuration and logging setup done here.

Contents:
    * :func:`cli` - Root command group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from hiworld import __init__conf__
from hiworld.adapters.config.greeting import GreetingSettings, load_greeting_settings
from hiworld.adapters.config.overrides import apply_overrides
from hiworld.domain.behaviors import DEFAULT_NAME

from .commands import cli_config, cli_info, emit_greeting
from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, resolve_services, store_cli_context

if TYPE_CHECKING:
    from hiworld.composition import AppServices


def _print_version(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Eager ``--version`` callback: print the banner and stop.

    Runs before the root body, so no configuration is loaded, no logging is
    initialised and no greeting is produced.
    """
    if not value or ctx.resilient_parsing:
        return
    services = resolve_services(ctx)
    click.echo(__init__conf__.version_banner(services.resolve_build_revision()))
    ctx.exit(0)


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Load configuration for ``profile`` and apply ``--set`` overrides.

    Raises:
        click.UsageError: If the profile name or an override is malformed.
    """
    try:
        config = services.get_config(profile=profile)
        return apply_overrides(config, set_overrides)
    except (TypeError, ValueError) as exc:
        raise click.UsageError(str(exc)) from exc


def _load_settings(config: Config) -> GreetingSettings:
    """Validate the ``[greeting]`` section, reporting problems as usage errors."""
    try:
        return load_greeting_settings(config)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.option(
    "--version",
    "-V",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_print_version,
    help="Print version and exit",
)
@click.option(
    "--name",
    "-n",
    type=str,
    default=None,
    help=f"Name of the person to greet (default: greeting.default_name, '{DEFAULT_NAME}')",
)
@click.option(
    "--gender",
    "-g",
    type=str,
    default=None,
    help="Gender of the person to greet: 'man' or 'woman'",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    name: str | None,
    gender: str | None,
    traceback: bool,
    profile: str | None,
    set_overrides: tuple[str, ...],
) -> None:
    """Greet NAME, or run a subcommand with the shared configuration.

    Loads configuration once, validates the ``[greeting]`` section,
    initialises logging and stores everything in the Click context. Without
    a subcommand it emits ``Hi, <name>, new world!!``.

    Example:
        >>> from click.testing import CliRunner
        >>> from hiworld.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["-n", "Alice", "-g", "woman"], obj=build_testing)
        >>> result.output
        'Hi, Ms. Alice, new world!!\\n'
    """
    services = resolve_services(ctx)
    config = _load_config(services, profile, set_overrides)
    settings = _load_settings(config)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        settings=settings,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        emit_greeting(name if name is not None else settings.default_name, gender, sink=settings.sink)


for _command in (cli_config, cli_info):
    cli.add_command(_command)


__all__ = ["cli"]
