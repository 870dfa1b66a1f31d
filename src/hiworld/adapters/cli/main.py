"""Process-level entry for the ``hiworld`` command.

Both the console script and ``python -m hiworld`` go through :func:`main`,
which turns whatever the Click group does into an integer exit code.

Contents:
    * :func:`main` - Run the CLI and return its exit code.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from hiworld import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from hiworld.composition import AppServices


def _report_unexpected(exc: BaseException) -> int:
    """Print ``exc`` through lib_cli_exit_tools and return its exit code.

    The traceback is shown in full only when ``--traceback`` switched it on;
    otherwise a truncated summary is printed.
    """
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    """Invoke the root group in non-standalone mode and classify the outcome.

    Click's own ``Exit`` (``--version``, ``--help``) keeps its code, Click
    usage errors are shown and keep theirs, and anything else, including
    ``SystemExit`` and ``KeyboardInterrupt``, goes to :func:`_report_unexpected`.
    """
    from .root import cli

    try:
        cli.main(
            args=list(argv) if argv is not None else sys.argv[1:],
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # noqa: BLE001
        return _report_unexpected(exc)
    return ExitCode.SUCCESS


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run ``hiworld`` and return the exit code.

    Args:
        argv: Arguments without the program name; None reads ``sys.argv``.
        restore_traceback: Put the traceback flags back the way they were
            before the run.
        services_factory: Builds the AppServices the commands use. Required;
            entry points pass ``build_production``.

    Returns:
        0 for every greeting (the invalid-gender fallback included), Click's
        code for usage errors, the mapped code for anything unexpected.

    Raises:
        ValueError: If services_factory is not provided.

    Example:
        >>> from hiworld.composition import build_testing
        >>> main(["--name", "Bob"], services_factory=build_testing)  # doctest: +SKIP
        Hi, Bob, new world!!
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    previous_state = snapshot_traceback_state()
    try:
        return _run_cli(argv, services_factory=services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(previous_state)
        # The runtime is process-wide; a worker thread must not tear it down.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
