"""Type-safe domain enums for genders, output sinks, and output formats."""

from __future__ import annotations

from enum import Enum


class Gender(str, Enum):
    """Recognised gender tokens and the honorific each one selects.

    Inherits from str so members compare equal to the raw CLI token.
    Matching is exact: ``"Man"`` or ``" man"`` are not members.

    Attributes:
        MAN: Selects the ``Mr.`` honorific.
        WOMAN: Selects the ``Ms.`` honorific.

    Example:
        >>> Gender("woman").honorific
        'Ms.'
        >>> Gender.MAN == "man"
        True
    """

    MAN = "man"
    WOMAN = "woman"

    @property
    def honorific(self) -> str:
        return _HONORIFICS[self]


_HONORIFICS: dict[Gender, str] = {
    Gender.MAN: "Mr.",
    Gender.WOMAN: "Ms.",
}


class OutputSink(str, Enum):
    """Destinations for the final greeting line.

    Attributes:
        STDOUT: Write the line directly to standard output.
        LOG: Emit the line as an INFO record through the logging runtime.

    Example:
        >>> OutputSink("log") is OutputSink.LOG
        True
    """

    STDOUT = "stdout"
    LOG = "log"


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "Gender",
    "OutputFormat",
    "OutputSink",
]
