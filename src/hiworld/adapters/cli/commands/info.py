"""Package metadata command."""

from __future__ import annotations

import logging

import rich_click as click

from hiworld import __init__conf__

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import command_log_scope, get_cli_context

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_info(ctx: click.Context) -> None:
    """Print resolved metadata so users can inspect installation details."""
    cli_ctx = get_cli_context(ctx)
    with command_log_scope("cli-info", command="info"):
        logger.info("Displaying package information")
        __init__conf__.print_info(revision=cli_ctx.services.resolve_build_revision())


__all__ = ["cli_info"]
