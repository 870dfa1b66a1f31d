"""Greeting emission for the root command.

Contents:
    * :func:`emit_greeting` - Resolve the greeting and write it to the sink.
"""

from __future__ import annotations

import logging

import rich_click as click

from hiworld.application.greeting import GreetingOutcome, resolve_greeting
from hiworld.domain.enums import OutputSink

from ..context import command_log_scope

logger = logging.getLogger(__name__)


def emit_greeting(name: str, gender: str | None, *, sink: OutputSink) -> GreetingOutcome:
    """Resolve the greeting for ``name``/``gender`` and emit one line.

    With ``OutputSink.STDOUT`` the line goes straight to standard output;
    with ``OutputSink.LOG`` it becomes an INFO record whose message is the
    line itself. An invalid gender is logged as a warning by the use case
    and never changes the exit code.

    Args:
        name: Name to greet, verbatim.
        gender: Optional raw gender token.
        sink: Destination of the line.

    Returns:
        The resolved outcome, for callers that inspect the fallback.
    """
    with command_log_scope("cli-greet", command="greet", sink=sink.value):
        outcome = resolve_greeting(name, gender)
        if sink is OutputSink.LOG:
            logger.info(outcome.message)
        else:
            click.echo(outcome.message)
    return outcome


__all__ = ["emit_greeting"]
