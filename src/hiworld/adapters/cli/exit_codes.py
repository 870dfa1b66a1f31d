"""Exit codes reported by ``hiworld``.

Every greeting path, the invalid-gender fallback included, ends with
:attr:`ExitCode.SUCCESS`. Failures outside the greeting are mapped by
``lib_cli_exit_tools`` and Click; the values here name the ones the
commands raise themselves.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes, following errno where one applies.

    Example:
        >>> int(ExitCode.INVALID_ARGUMENT)
        22
    """

    SUCCESS = 0
    #: Raised by Click for malformed options and by the root for bad configuration.
    USAGE_ERROR = 2
    #: EINVAL: the ``config`` command was asked for a section that does not exist.
    INVALID_ARGUMENT = 22


__all__ = ["ExitCode"]
