"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from .enums import Gender
from .errors import InvalidGenderError

GREETING_PREFIX = "Hi"
GREETING_SUFFIX = ", new world!!"
DEFAULT_NAME = "Youre"


def parse_gender(raw: str | None) -> Gender | None:
    """Classify a raw gender token.

    Args:
        raw: Token as typed by the user, or None when no gender was given.

    Returns:
        None for an absent token, otherwise the matching :class:`Gender`.

    Raises:
        InvalidGenderError: If ``raw`` is present but not exactly ``man`` or
            ``woman``. An empty string is present, and therefore invalid.

    Example:
        >>> parse_gender(None) is None
        True
        >>> parse_gender("man")
        <Gender.MAN: 'man'>
    """
    if raw is None:
        return None
    try:
        return Gender(raw)
    except ValueError as exc:
        raise InvalidGenderError(raw) from exc


def build_greeting(name: str, gender: str | None = None) -> str:
    r"""Return the greeting for ``name``, qualified by ``gender`` when given.

    The name is embedded verbatim: no trimming, escaping, or normalisation,
    so empty and multi-byte names pass straight through.

    Args:
        name: Name of the person to greet.
        gender: Optional raw gender token.

    Returns:
        ``"Hi, {name}"``, ``"Hi, Mr. {name}"`` or ``"Hi, Ms. {name}"``.

    Raises:
        InvalidGenderError: If ``gender`` is present but unrecognised.

    Example:
        >>> build_greeting("Alice")
        'Hi, Alice'
        >>> build_greeting("John", "man")
        'Hi, Mr. John'
        >>> build_greeting("世界")
        'Hi, 世界'
    """
    parsed = parse_gender(gender)
    if parsed is None:
        return f"{GREETING_PREFIX}, {name}"
    return f"{GREETING_PREFIX}, {parsed.honorific} {name}"


def build_fallback_greeting(name: str, gender: str) -> str:
    """Return the unqualified greeting annotated with the rejected gender.

    Example:
        >>> build_fallback_greeting("Charlie", "other")
        'Hi, Charlie (invalid gender: other)'
    """
    return f"{GREETING_PREFIX}, {name} (invalid gender: {gender})"


def compose_message(greeting: str) -> str:
    """Append the fixed suffix that completes every emitted line.

    Example:
        >>> compose_message("Hi, Youre")
        'Hi, Youre, new world!!'
    """
    return f"{greeting}{GREETING_SUFFIX}"


__all__ = [
    "DEFAULT_NAME",
    "GREETING_PREFIX",
    "GREETING_SUFFIX",
    "build_fallback_greeting",
    "build_greeting",
    "compose_message",
    "parse_gender",
]
